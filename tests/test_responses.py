#
#
#

from unittest import TestCase

import dns.message
import dns.rdatatype

from helpers import dns_response, http_response

from powerdns_dock.exceptions import (
    Conflict,
    DecodeError,
    InvalidResponse,
    NotFound,
)
from powerdns_dock.models import ServerResource, ServiceRecord
from powerdns_dock.responses import (
    HTTPResult,
    capture,
    check_status,
    conflict_message,
    decode,
    decode_list,
    services_from_answer,
)


class TestCapture(TestCase):
    def test_capture(self):
        result = capture(http_response(201, {'a': 1}), success=(200, 201))
        self.assertEqual(HTTPResult(201, b'{"a": 1}', True), result)

        result = capture(http_response(404))
        self.assertEqual(HTTPResult(404, b'', False), result)


class TestCheckStatus(TestCase):
    def test_ok(self):
        self.assertIsNone(check_status(HTTPResult(200, b'', True)))

    def test_bad_request(self):
        with self.assertRaises(InvalidResponse) as ctx:
            check_status(HTTPResult(400, b'', False), not_found=True)
        self.assertEqual(400, ctx.exception.status)
        self.assertEqual('Invalid HTTP response', str(ctx.exception))

    def test_not_found(self):
        with self.assertRaises(NotFound):
            check_status(HTTPResult(404, b'', False), not_found=True)
        # only operations keyed by uuid map 404
        with self.assertRaises(InvalidResponse):
            check_status(HTTPResult(404, b'', False))

    def test_conflict(self):
        with self.assertRaises(Conflict) as ctx:
            check_status(
                HTTPResult(422, b'{"error": "uuid conflict"}', False),
                conflict=True,
            )
        self.assertEqual('uuid conflict', str(ctx.exception))
        with self.assertRaises(InvalidResponse):
            check_status(HTTPResult(422, b'', False))

    def test_other(self):
        with self.assertRaises(InvalidResponse):
            check_status(
                HTTPResult(500, b'', False), not_found=True, conflict=True
            )


class TestConflictMessage(TestCase):
    def test_messages(self):
        self.assertEqual('taken', conflict_message(b'{"error": "taken"}'))
        self.assertEqual(
            'resource already exists', conflict_message(b'{"error": ""}')
        )
        self.assertEqual('resource already exists', conflict_message(b'{}'))
        self.assertEqual(
            'resource already exists', conflict_message(b'<html>nope')
        )
        self.assertEqual('resource already exists', conflict_message(b''))


class TestDecode(TestCase):
    def test_decode(self):
        result = HTTPResult(200, b'{"Name": "db", "Port": 80}', True)
        self.assertEqual(
            ServiceRecord(name='db', port=80), decode(result, ServiceRecord)
        )

    def test_decode_malformed(self):
        with self.assertRaises(DecodeError):
            decode(HTTPResult(200, b'{"Name": ', True), ServiceRecord)
        with self.assertRaises(DecodeError):
            decode(HTTPResult(200, b'', True), ServiceRecord)
        with self.assertRaises(DecodeError):
            decode(HTTPResult(200, b'{"Port": "http"}', True), ServiceRecord)

    def test_decode_list(self):
        result = HTTPResult(200, b'[{"id": "localhost"}]', True)
        self.assertEqual(
            [ServerResource(id='localhost')],
            decode_list(result, ServerResource),
        )
        self.assertEqual(
            [], decode_list(HTTPResult(200, b'', True), ServerResource)
        )
        self.assertEqual(
            [], decode_list(HTTPResult(200, b'null', True), ServerResource)
        )
        with self.assertRaises(DecodeError):
            decode_list(HTTPResult(200, b'{}', True), ServerResource)


class TestServicesFromAnswer(TestCase):
    def setUp(self):
        self.query = dns.message.make_query('skydns.local.', dns.rdatatype.SRV)

    def test_empty(self):
        self.assertEqual([], services_from_answer(dns_response(self.query)))

    def test_srv(self):
        response = dns_response(
            self.query,
            ('svc.skydns.local.', 30, 'IN', 'SRV', '10 5 8080 h.example.'),
        )
        services = services_from_answer(response)
        self.assertEqual(1, len(services))
        service = services[0]
        self.assertEqual('h.example.', service.host)
        self.assertEqual(8080, service.port)
        self.assertEqual(30, service.ttl)
        self.assertEqual(
            'svc.skydns.local. (Priority: 10, Weight: 5)', service.name
        )

    def test_skips_other_types(self):
        response = dns_response(
            self.query,
            ('skydns.local.', 60, 'IN', 'A', '192.0.2.1'),
            (
                'a.skydns.local.',
                20,
                'IN',
                'SRV',
                '1 2 53 ns1.example.',
                '3 4 54 ns2.example.',
            ),
        )
        services = services_from_answer(response)
        self.assertEqual(
            [('ns1.example.', 53), ('ns2.example.', 54)],
            sorted((s.host, s.port) for s in services),
        )
