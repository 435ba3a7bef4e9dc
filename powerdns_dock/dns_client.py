#
#
#

"""Direct DNS path: builds questions under the service domain and exchanges
them with a single configured server over UDP."""

import socket
from typing import Optional, Tuple

import dns.inet
import dns.message
import dns.query

from .exceptions import ConfigurationError

DEFAULT_PORT = 53


def fqdn(domain: str) -> str:
    if domain.endswith('.'):
        return domain
    return f'{domain}.'


def split_address(address: str) -> Tuple[str, int]:
    """Split ``host[:port]`` (or ``[v6]:port``) into host and port."""
    if address.startswith('['):
        host, _, port = address[1:].partition(']')
        port = port[1:]
    elif address.count(':') == 1:
        host, _, port = address.partition(':')
    else:
        # bare host or unbracketed IPv6
        host, port = address, ''
    if not port:
        return host, DEFAULT_PORT
    try:
        return host, int(port)
    except ValueError:
        raise ConfigurationError(f'Invalid DNS port in {address!r}')


class DnsServiceClient:
    DEFAULT_TIMEOUT = 2

    def __init__(
        self, address: str, domain: str, timeout: Optional[float] = None
    ):
        if not address:
            raise ConfigurationError('No DNS address specified')
        self.address = address
        self.host, self.port = split_address(address)
        self.domain = fqdn(domain)
        if timeout is None:
            timeout = self.DEFAULT_TIMEOUT
        self.timeout = timeout

    def build_question(self, name: str, qtype) -> dns.message.Message:
        qname = f'{name}.{self.domain}' if name else self.domain
        return dns.message.make_query(qname, qtype)

    def where(self) -> str:
        """IP address of the server, resolving a host name on each call."""
        if dns.inet.is_address(self.host):
            return self.host
        info = socket.getaddrinfo(self.host, self.port, type=socket.SOCK_DGRAM)
        return info[0][4][0]

    def exchange(self, query: dns.message.Message) -> dns.message.Message:
        return dns.query.udp(
            query, self.where(), timeout=self.timeout, port=self.port
        )
