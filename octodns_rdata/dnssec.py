#
#
#

"""DNSSEC record types, RFC 4034."""

from .base import RdataMixin, readonly
from .fields import (
    Base64Field,
    HexField,
    NameField,
    RrTypeField,
    RrTypeListField,
    UnsignedField,
)
from .registry import register_type

# RFC 4034 section 2.1.2, any other value makes the key invalid
DNSKEY_PROTOCOL = 3
# labels in the original owner name, the root and a leading wildcard not
# counted, can't exceed what fits in a 255 octet name
MAX_LABELS = 127


class DnskeyRdata(RdataMixin):
    TYPE = readonly('DNSKEY')

    flags = UnsignedField(16, 'Zone key is 256, secure entry point adds 1')
    protocol = UnsignedField(
        8, 'Always 3', minimum=DNSKEY_PROTOCOL, maximum=DNSKEY_PROTOCOL
    )
    algorithm = UnsignedField(8)
    public_key = Base64Field('Public key material, base64 text or bytes')

    def output(self):
        return ' '.join(str(v) for v in self._values())


register_type(DnskeyRdata)


class DsRdata(RdataMixin):
    TYPE = readonly('DS')

    key_tag = UnsignedField(16)
    algorithm = UnsignedField(8)
    digest_type = UnsignedField(8)
    digest = HexField()

    def output(self):
        key_tag, algorithm, digest_type, digest = self._values()
        return f'{key_tag} {algorithm} {digest_type} {digest}'


register_type(DsRdata)


class RrsigRdata(RdataMixin):
    '''
    Signature over an RRset, RFC 4034 section 3.

    Fields are presented in the order declared here, separated by single
    spaces. Timestamps are seconds since the epoch and are rendered as
    plain integers.
    '''

    TYPE = readonly('RRSIG')

    type_covered = RrTypeField('RR type of the covered RRset, e.g. A or MX')
    algorithm = UnsignedField(8, 'Algorithm of the signing key')
    labels = UnsignedField(
        8, 'Labels in the original owner name', maximum=MAX_LABELS
    )
    original_ttl = UnsignedField(32, 'TTL of the covered RRset')
    signature_expiration = UnsignedField(32)
    signature_inception = UnsignedField(32)
    key_tag = UnsignedField(16, 'Key tag of the validating DNSKEY')
    signers_name = NameField('Zone of the covered RRset')
    signature = Base64Field('Signature, base64 text or bytes')

    def output(self):
        return ' '.join(str(v) for v in self._values())


register_type(RrsigRdata)


class NsecRdata(RdataMixin):
    TYPE = readonly('NSEC')

    next_domain_name = NameField('Next owner name in canonical order')
    types = RrTypeListField('RR types present at the owner name')

    def output(self):
        next_domain_name, types = self._values()
        return ' '.join((next_domain_name,) + types)


register_type(NsecRdata)
