#
#
#

import logging
from typing import Optional

__version__ = __VERSION__ = '0.1.0'

from .dns_client import DnsServiceClient  # noqa: E402
from .exceptions import (  # noqa: E402
    ConfigurationError,
    Conflict,
    DecodeError,
    InvalidResponse,
    NotFound,
    PowerDnsClientException,
)
from .http_client import PowerDnsHttpClient  # noqa: E402
from .models import (  # noqa: E402
    Callback,
    NameCount,
    ServerResource,
    ServiceRecord,
    Zone,
    ZoneRecord,
)
from .responses import check_status, decode, decode_list  # noqa: E402

__all__ = [
    'Callback',
    'Client',
    'ConfigurationError',
    'Conflict',
    'DecodeError',
    'InvalidResponse',
    'NameCount',
    'NotFound',
    'PowerDnsClientException',
    'ServerResource',
    'ServiceRecord',
    'Zone',
    'ZoneRecord',
]


class Client(object):
    '''
    Client for a PowerDNS HTTP API fronting SkyDNS style service records,
    with a direct DNS path for listing services.

    client = Client(
        'http://127.0.0.1:8081/api/v1',
        secret='s3cr3t',
        domain='skydns.local',
        dns_address='127.0.0.1:53',
    )

    Operations are single attempt and hold no state between calls. `delete`
    and `update` are best-effort: once the server answers they succeed
    whatever the status. Every other operation classifies the status.
    '''

    DEFAULT_SERVER = 'localhost'
    ZONE_KIND = 'Native'
    LISTING_SOURCES = ('http', 'dns')

    def __init__(self, base, secret=None, domain='', dns_address='', **kwargs):
        self.log = logging.getLogger(f'PowerDnsClient[{base}]')
        timeout = kwargs.pop('timeout', None)
        if kwargs:
            raise TypeError(
                f'Unexpected arguments: {", ".join(sorted(kwargs))}'
            )
        self.log.debug(
            '__init__: base=%s, secret=***, domain=%s, dns_address=%s',
            base,
            domain,
            dns_address,
        )
        self.http = PowerDnsHttpClient(base, secret, timeout=timeout)
        self.dns = DnsServiceClient(dns_address, domain, timeout=timeout)

    @property
    def domain(self):
        return self.dns.domain

    def _create_strategy(self, source):
        if source == 'http':
            from .strategies import HTTPStrategy

            return HTTPStrategy()
        elif source == 'dns':
            from .strategies import DNSStrategy

            return DNSStrategy()
        raise ValueError(
            f"Invalid listing source '{source}'. Must be 'http' or 'dns'"
        )

    # servers

    def get_servers(self):
        self.log.debug('get_servers:')
        result = self.http.get('servers')
        check_status(result)
        return decode_list(result, ServerResource)

    def get_server(self, uuid):
        self.log.debug('get_server: uuid=%s', uuid)
        result = self.http.get(f'servers/{uuid}')
        check_status(result, not_found=True)
        return decode(result, ServerResource)

    def get_server_configs(self):
        # GET /servers/:server_id/config is not supported yet
        return None

    def get_server_config(self, name):
        # GET /servers/:server_id/config/:config_setting_name is not
        # supported yet
        return None

    # zones

    def get_zones(self):
        self.log.debug('get_zones:')
        result = self.http.get(f'servers/{self.DEFAULT_SERVER}/zones')
        check_status(result)
        return decode_list(result, Zone)

    def add_zone(self, zone, server=None):
        '''
        Create `zone`, either a name or a Zone, on `server`. The zone is
        always created Native with no masters or nameservers.
        '''
        if server is None:
            server = self.DEFAULT_SERVER
        if not isinstance(zone, Zone):
            zone = Zone(name=zone)
        zone = zone.model_copy(
            update={'kind': self.ZONE_KIND, 'masters': [], 'nameservers': []}
        )
        self.log.debug('add_zone: name=%s, server=%s', zone.name, server)
        result = self.http.post(f'servers/{server}/zones', zone)
        check_status(result, conflict=True)
        return decode(result, Zone)

    # services

    def add(self, uuid, service):
        '''
        Register `service` by creating a zone named after its version. The
        uuid does not take part in the request.
        '''
        self.log.debug('add: uuid=%s, version=%s', uuid, service.version)
        self.add_zone(service.version)

    def delete(self, uuid):
        '''
        Best-effort: any response from the server counts as success.
        '''
        self.log.debug('delete: uuid=%s', uuid)
        self.http.fire('DELETE', uuid)

    def get(self, uuid):
        self.log.debug('get: uuid=%s', uuid)
        result = self.http.get(uuid)
        check_status(result, not_found=True)
        return decode(result, ServiceRecord)

    def update(self, uuid, ttl):
        '''
        Best-effort: any response from the server counts as success.
        '''
        self.log.debug('update: uuid=%s, ttl=%d', uuid, ttl)
        self.http.fire('PATCH', uuid, {'TTL': ttl})

    def list_services(self, source='http'):
        self.log.debug('list_services: source=%s', source)
        return self._create_strategy(source).list_services(self)

    def get_all_services(self):
        return self.list_services('http')

    def get_all_services_dns(self):
        return self.list_services('dns')

    # skydns

    def _name_counts(self, path):
        result = self.http.get(path)
        if not result.ok:
            return {}
        return decode(result, Optional[NameCount]) or {}

    def get_regions(self):
        self.log.debug('get_regions:')
        return self._name_counts('skydns/regions/')

    def get_environments(self):
        self.log.debug('get_environments:')
        return self._name_counts('skydns/environments/')

    def add_callback(self, uuid, callback):
        self.log.debug('add_callback: uuid=%s', uuid)
        result = self.http.put(f'skydns/callbacks/{uuid}', callback)
        check_status(result, not_found=True)
