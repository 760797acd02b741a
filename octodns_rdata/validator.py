#
#
#

"""Stateless predicates for the grammars RDATA fields are drawn from.

Every function here is pure: it takes a candidate value and answers
``True`` or ``False`` without raising, so the same checks can be shared by
any field of any record type.
"""

import re
from ipaddress import IPv4Address, IPv6Address

from dns.exception import DNSException
from dns.name import from_text as name_from_text
from dns.rdatatype import from_text as rdatatype_from_text, is_metatype

_BASE64_RE = re.compile(r'^[A-Za-z0-9+/]+={0,2}$')
_HEX_RE = re.compile(r'^[0-9A-Fa-f]+$')
_WHITESPACE_RE = re.compile(r'\s')
# characters that end or group tokens in zone file text
_SPECIAL_RE = re.compile(r'[\s"();]')
# \DDD or \X, where X is not a digit
_ESCAPE_RE = re.compile(r'\\(\d{3}|[^\d\s])')


def is_valid_ipv6_address(value):
    """Whether ``value`` is an RFC 4291 textual IPv6 address.

    Accepts the full eight group form, ``::`` compression and an embedded
    IPv4 suffix. Scoped addresses (``fe80::1%eth0``) are not addresses in
    zone data and are rejected.
    """
    if not isinstance(value, str) or '%' in value or value != value.strip():
        return False
    try:
        IPv6Address(value)
    except ValueError:
        return False
    return True


def is_valid_ipv4_address(value):
    if not isinstance(value, str) or value != value.strip():
        return False
    try:
        IPv4Address(value)
    except ValueError:
        return False
    return True


def is_valid_domain_name(value):
    """Whether ``value`` is a presentation format domain name.

    Both absolute (``example.com.``) and relative names are accepted, as is
    ``@``. Unescaped whitespace, quotes, parentheses and semicolons would
    end or group zone file tokens and are rejected, escaped ones (``a\\;b``)
    are fine. Names must already be ASCII, IDNs as A-labels (``xn--``).
    """
    if not isinstance(value, str) or not value or not value.isascii():
        return False
    if _SPECIAL_RE.search(_ESCAPE_RE.sub('', value)):
        return False
    if value == '@':
        return True
    try:
        name_from_text(value)
    except DNSException:
        return False
    return True


def is_valid_rr_type(value):
    """Whether ``value`` names a data RR type, e.g. ``A`` or ``TYPE65534``.

    Meta types such as ``ANY`` or ``AXFR`` never appear in zone data.
    """
    if not isinstance(value, str) or not value:
        return False
    if _WHITESPACE_RE.search(value):
        return False
    try:
        rdtype = rdatatype_from_text(value)
    except (DNSException, ValueError):
        return False
    return not is_metatype(rdtype)


def is_valid_base64(value):
    # whitespace is allowed inside base64 blobs in presentation format
    if not isinstance(value, str):
        return False
    return bool(_BASE64_RE.match(_WHITESPACE_RE.sub('', value)))


def is_valid_hex(value):
    if not isinstance(value, str):
        return False
    return bool(_HEX_RE.match(value)) and len(value) % 2 == 0


def is_integer(value):
    # bool is an int subclass but never a field value
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_unsigned(value, bits):
    return is_integer(value) and 0 <= value < 2**bits
