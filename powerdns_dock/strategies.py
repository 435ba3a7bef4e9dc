#
#
#

"""Listing strategies for registered services.

Services can be listed through the HTTP API or through an SRV query against
the service domain. The two paths share nothing but the result type, so
each is its own strategy and callers choose one explicitly.
"""

from typing import List, Protocol

from dns.rdatatype import SRV

from .models import ServiceRecord
from .responses import decode_list, services_from_answer


class ListingStrategy(Protocol):
    """Protocol for service listing strategies."""

    def list_services(self, client) -> List[ServiceRecord]:
        """List every registered service.

        Args:
            client: Client whose transports are used

        Returns:
            List of ServiceRecord, empty when nothing is registered
        """
        ...


class HTTPStrategy:
    """List via ``GET {base}/``.

    A non-200 response is not an error; it lists nothing.
    """

    def list_services(self, client) -> List[ServiceRecord]:
        result = client.http.get('')
        if not result.ok:
            return []
        return decode_list(result, ServiceRecord)


class DNSStrategy:
    """List via an SRV query for the service domain itself.

    An answer without SRV records lists nothing.
    """

    def list_services(self, client) -> List[ServiceRecord]:
        query = client.dns.build_question('', SRV)
        return services_from_answer(client.dns.exchange(query))
