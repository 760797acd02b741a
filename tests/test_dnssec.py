#
#
#

from unittest import TestCase

from octodns.record.exception import RecordException

from octodns_rdata import (
    DnskeyRdata,
    DsRdata,
    NsecRdata,
    RdataIncompleteError,
    RdataOutOfRangeError,
    RdataValidationError,
    RrsigRdata,
)


def _rrsig(**kwargs):
    fields = {
        'type_covered': 'A',
        'algorithm': 8,
        'labels': 2,
        'original_ttl': 86400,
        'signature_expiration': 1893456000,
        'signature_inception': 1861920000,
        'key_tag': 12345,
        'signers_name': 'example.com.',
        'signature': 'Kx2mK7txn==',
    }
    fields.update(kwargs)
    return RrsigRdata(**fields)


class TestRrsigRdata(TestCase):
    expected = (
        'A 8 2 86400 1893456000 1861920000 12345 example.com. Kx2mK7txn=='
    )

    def test_output(self):
        rdata = RrsigRdata()
        rdata.type_covered = 'A'
        rdata.algorithm = 8
        rdata.labels = 2
        rdata.original_ttl = 86400
        rdata.signature_expiration = 1893456000
        rdata.signature_inception = 1861920000
        rdata.key_tag = 12345
        rdata.signers_name = 'example.com.'
        rdata.signature = 'Kx2mK7txn=='
        self.assertEqual(self.expected, rdata.output())
        # nothing changed, same text
        self.assertEqual(rdata.output(), rdata.output())

        self.assertEqual('A', rdata.type_covered)
        self.assertEqual(8, rdata.algorithm)
        self.assertEqual(2, rdata.labels)
        self.assertEqual(86400, rdata.original_ttl)
        self.assertEqual(1893456000, rdata.signature_expiration)
        self.assertEqual(1861920000, rdata.signature_inception)
        self.assertEqual(12345, rdata.key_tag)
        self.assertEqual('example.com.', rdata.signers_name)
        self.assertEqual('Kx2mK7txn==', rdata.signature)

    def test_keyword_construction(self):
        self.assertEqual(self.expected, _rrsig().output())

    def test_incomplete(self):
        rdata = RrsigRdata()
        with self.assertRaises(RdataIncompleteError) as ctx:
            rdata.output()
        self.assertEqual(
            (
                'type_covered',
                'algorithm',
                'labels',
                'original_ttl',
                'signature_expiration',
                'signature_inception',
                'key_tag',
                'signers_name',
                'signature',
            ),
            ctx.exception.missing,
        )

        # everything but the signature
        fields = {
            'type_covered': 'A',
            'algorithm': 8,
            'labels': 2,
            'original_ttl': 86400,
            'signature_expiration': 1893456000,
            'signature_inception': 1861920000,
            'key_tag': 12345,
            'signers_name': 'example.com.',
        }
        rdata = RrsigRdata(**fields)
        with self.assertRaises(RdataIncompleteError) as ctx:
            rdata.output()
        self.assertEqual(('signature',), ctx.exception.missing)
        self.assertIn('signature', str(ctx.exception))
        self.assertEqual(['signature'], rdata.missing())

    def test_out_of_range(self):
        rdata = _rrsig()
        for field, value in (
            ('algorithm', 256),
            ('algorithm', -1),
            ('labels', 128),
            ('original_ttl', 2**32),
            ('signature_expiration', 2**32),
            ('signature_inception', -1),
            ('key_tag', 65536),
        ):
            with self.assertRaises(RdataOutOfRangeError) as ctx:
                setattr(rdata, field, value)
            self.assertEqual(field, ctx.exception.field)
            self.assertEqual(value, ctx.exception.value)
        # nothing stuck
        self.assertEqual(self.expected, rdata.output())

    def test_bounds_inclusive(self):
        rdata = _rrsig(
            algorithm=255,
            labels=127,
            original_ttl=2**32 - 1,
            key_tag=0,
        )
        self.assertEqual(255, rdata.algorithm)
        self.assertEqual(127, rdata.labels)

        with self.assertRaises(RdataOutOfRangeError) as ctx:
            rdata.labels = 128
        self.assertEqual(0, ctx.exception.minimum)
        self.assertEqual(127, ctx.exception.maximum)

    def test_wrong_types(self):
        rdata = _rrsig()
        for field, value in (
            ('algorithm', '8'),
            ('labels', True),
            ('key_tag', 1.5),
            ('signers_name', 42),
            ('type_covered', 1),
        ):
            with self.assertRaises(RdataValidationError):
                setattr(rdata, field, value)
        self.assertEqual(self.expected, rdata.output())

    def test_grammars(self):
        rdata = _rrsig()
        with self.assertRaises(RdataValidationError) as ctx:
            rdata.type_covered = 'NOTATYPE'
        self.assertEqual('not a valid RR type', ctx.exception.reason)
        with self.assertRaises(RdataValidationError):
            rdata.type_covered = 'ANY'
        with self.assertRaises(RdataValidationError) as ctx:
            rdata.signers_name = 'example..com.'
        self.assertEqual('not a valid domain name', ctx.exception.reason)
        with self.assertRaises(RdataValidationError) as ctx:
            rdata.signature = 'not base64!'
        self.assertEqual('not valid base64', ctx.exception.reason)
        self.assertEqual(self.expected, rdata.output())

        rdata.type_covered = 'TYPE65534'
        self.assertTrue(rdata.output().startswith('TYPE65534 8 2 '))

    def test_signature_whitespace_dropped(self):
        rdata = _rrsig(signature='  Kx2m\nK7txn==\n')
        self.assertEqual('Kx2mK7txn==', rdata.signature)
        self.assertEqual(self.expected, rdata.output())

        rdata.signature = 'Kx2m K7t\txn=='
        self.assertEqual(self.expected, rdata.output())

    def test_signature_bytes(self):
        rdata = _rrsig(signature=b'\x00\x01\x02\x03')
        self.assertEqual('AAECAw==', rdata.signature)
        self.assertTrue(rdata.output().endswith(' example.com. AAECAw=='))

    def test_errors_are_octodns_record_exceptions(self):
        with self.assertRaises(RecordException):
            _rrsig(algorithm=300)
        with self.assertRaises(RecordException):
            RrsigRdata().output()


class TestDsRdata(TestCase):
    def test_ds(self):
        rdata = DsRdata(
            key_tag=2371, algorithm=8, digest_type=2, digest='31FDAB'
        )
        self.assertEqual('DS', rdata.type_identifier())
        self.assertEqual('2371 8 2 31FDAB', rdata.output())

        with self.assertRaises(RdataValidationError):
            rdata.digest = '31FDA'
        with self.assertRaises(RdataOutOfRangeError):
            rdata.digest_type = 256
        self.assertEqual('2371 8 2 31FDAB', rdata.output())


class TestDnskeyRdata(TestCase):
    def test_dnskey(self):
        rdata = DnskeyRdata(
            flags=257, protocol=3, algorithm=13, public_key='AwEAAQ=='
        )
        self.assertEqual('257 3 13 AwEAAQ==', rdata.output())

    def test_protocol_must_be_3(self):
        rdata = DnskeyRdata()
        for protocol in (0, 2, 4, 255):
            with self.assertRaises(RdataOutOfRangeError) as ctx:
                rdata.protocol = protocol
            self.assertEqual(3, ctx.exception.minimum)
            self.assertEqual(3, ctx.exception.maximum)
        self.assertIsNone(rdata.protocol)

    def test_public_key_whitespace_dropped(self):
        rdata = DnskeyRdata(
            flags=256, protocol=3, algorithm=8, public_key=' AwEA\n AQ== '
        )
        self.assertEqual('256 3 8 AwEAAQ==', rdata.output())

    def test_public_key_bytes(self):
        rdata = DnskeyRdata(public_key=b'\xff\xfe')
        self.assertEqual('//4=', rdata.public_key)
        with self.assertRaises(RdataValidationError):
            rdata.public_key = b''


class TestNsecRdata(TestCase):
    def test_nsec(self):
        rdata = NsecRdata(
            next_domain_name='host.example.com.',
            types=['A', 'MX', 'RRSIG', 'NSEC', 'TYPE1234'],
        )
        self.assertEqual(
            'host.example.com. A MX RRSIG NSEC TYPE1234', rdata.output()
        )
        self.assertEqual(('A', 'MX', 'RRSIG', 'NSEC', 'TYPE1234'), rdata.types)

    def test_invalid_types(self):
        rdata = NsecRdata(next_domain_name='host.example.com.', types=('A',))
        for types in ('A MX', [], ['A', 'BOGUS'], None):
            with self.assertRaises(RdataValidationError):
                rdata.types = types
        self.assertEqual('host.example.com. A', rdata.output())
