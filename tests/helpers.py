#
# Shared HTTP and DNS fixtures
#

import json
from unittest.mock import Mock

import dns.message
import dns.rrset
from requests import Response


def http_response(status, body=None):
    response = Response()
    response.status_code = status
    if body is None:
        body = b''
    elif not isinstance(body, bytes):
        body = json.dumps(body).encode('utf-8')
    response._content = body
    response._content_consumed = True
    return response


def mock_send(client, status, body=None):
    session = getattr(client, 'http', client)._session
    session.send = Mock(return_value=http_response(status, body))
    return session.send


def sent_request(send):
    return send.call_args[0][0]


def dns_response(query, *rrsets):
    response = dns.message.make_response(query)
    for text in rrsets:
        response.answer.append(dns.rrset.from_text(*text))
    return response
