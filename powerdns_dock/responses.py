#
#
#

"""Interpretation of raw transport responses.

HTTP responses are first captured into an ``HTTPResult`` (status plus body,
tagged as success or failure by status alone) and only then classified or
decoded. DNS answers are mapped straight onto ``ServiceRecord``.
"""

from typing import Iterable, List, NamedTuple, Optional, Type

from dns.rdatatype import SRV
from pydantic import TypeAdapter, ValidationError

from .exceptions import Conflict, DecodeError, InvalidResponse, NotFound
from .models import ErrorEnvelope, ServiceRecord


class HTTPResult(NamedTuple):
    status: int
    content: bytes
    ok: bool


def capture(response, success: Iterable[int] = (200,)) -> HTTPResult:
    """Read ``response`` completely and release it."""
    with response:
        content = response.content or b''
    status = response.status_code
    return HTTPResult(status, content, status in success)


def conflict_message(content: bytes) -> str:
    try:
        envelope = ErrorEnvelope.model_validate_json(content)
    except ValidationError:
        return Conflict.DEFAULT_MESSAGE
    return envelope.error or Conflict.DEFAULT_MESSAGE


def check_status(
    result: HTTPResult, not_found: bool = False, conflict: bool = False
) -> None:
    """Raise the error a failed result maps to.

    ``not_found`` and ``conflict`` opt an operation into the 404 and 422
    mappings; otherwise every non-success status is an ``InvalidResponse``.
    """
    if result.ok:
        return
    if result.status == 404 and not_found:
        raise NotFound()
    if result.status == 422 and conflict:
        raise Conflict(conflict_message(result.content))
    raise InvalidResponse(result.status)


def decode(result: HTTPResult, model: Type):
    try:
        return TypeAdapter(model).validate_json(result.content)
    except ValidationError as e:
        raise DecodeError(f'Unable to decode {result.status} body: {e}') from e


def decode_list(result: HTTPResult, model: Type) -> List:
    # an empty or null body is an empty collection
    if not result.content.strip():
        return []
    return decode(result, Optional[List[model]]) or []


def services_from_answer(message) -> List[ServiceRecord]:
    services = []
    for rrset in message.answer:
        if rrset.rdtype != SRV:
            continue
        for rdata in rrset:
            services.append(
                ServiceRecord(
                    name=f'{rrset.name} (Priority: {rdata.priority}, '
                    f'Weight: {rdata.weight})',
                    host=str(rdata.target),
                    port=rdata.port,
                    ttl=rrset.ttl,
                )
            )
    return services
