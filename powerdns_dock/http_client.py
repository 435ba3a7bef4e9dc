#
#
#

from requests import Request, Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .exceptions import ConfigurationError
from .models import WireModel
from .responses import capture


class PowerDnsHttpClient(object):
    API_KEY = 'SOMEKEY'

    def __init__(self, base, secret=None, timeout=None):
        if not base:
            raise ConfigurationError('No HTTP address specified')
        self.base = base
        self.secret = secret
        self.timeout = timeout

        session = Session()
        session.headers.update(
            {
                'User-Agent': f'octodns/{octodns_version} powerdns-dock/{package_version}'
            }
        )
        self._session = session

    def url(self, path):
        # no escaping and no slash normalisation
        return f'{self.base}/{path}'

    def build_request(self, method, path, body=None):
        if not self.base:
            raise ConfigurationError('No HTTP address specified')
        headers = {'X-API-Key': self.API_KEY}
        if self.secret:
            headers['Authorization'] = self.secret
        if isinstance(body, WireModel):
            body = body.to_wire()
        return Request(method, self.url(path), headers=headers, json=body)

    def _do(self, method, path, body=None, success=(200,)):
        request = self._session.prepare_request(
            self.build_request(method, path, body)
        )
        response = self._session.send(request, timeout=self.timeout)
        return capture(response, success)

    def get(self, path, success=(200,)):
        return self._do('GET', path, success=success)

    def post(self, path, body, success=(200, 201)):
        return self._do('POST', path, body, success)

    def put(self, path, body, success=(201,)):
        return self._do('PUT', path, body, success)

    def fire(self, method, path, body=None):
        """Best-effort request: the response is read, released and ignored.

        Only transport failures are raised.
        """
        self._do(method, path, body)
