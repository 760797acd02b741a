#
#
#

import re

from .base import RdataMixin, readonly
from .exceptions import RdataValidationError
from .fields import Field, TextField, UnsignedField
from .registry import register_type

# a character-string holds at most 255 octets
CHUNK_SIZE = 255


def escape(octets):
    '''
    RFC 1035 section 5.1 escaping of a character-string's octets: quote and
    backslash get a backslash, anything outside printable ASCII is \\DDD.
    '''
    out = []
    for octet in octets:
        if octet in (0x22, 0x5C):
            out.append(f'\\{chr(octet)}')
        elif 0x20 <= octet < 0x7F:
            out.append(chr(octet))
        else:
            out.append(f'\\{octet:03d}')
    return ''.join(out)


def quote(value):
    if isinstance(value, str):
        value = value.encode('utf-8')
    return f'"{escape(value)}"'


def chunked(value, size=CHUNK_SIZE):
    octets = value.encode('utf-8')
    if not octets:
        return [b'']
    return [octets[i : i + size] for i in range(0, len(octets), size)]


class TxtRdata(RdataMixin):
    TYPE = readonly('TXT')

    text = TextField(
        'Free form text, split into quoted character-strings on output'
    )

    def output(self):
        (text,) = self._values()
        return ' '.join(quote(c) for c in chunked(text))


register_type(TxtRdata)


class CaaTagField(Field):
    _tag_re = re.compile(r'^[A-Za-z0-9]+$')

    def clean(self, value):
        value = super().clean(value)
        if not self._tag_re.match(value):
            raise RdataValidationError(
                self.name, value, 'not an alphanumeric tag'
            )
        return value


class CaaRdata(RdataMixin):
    TYPE = readonly('CAA')

    flags = UnsignedField(8, 'Issuer critical flag is 128')
    tag = CaaTagField('Property tag, e.g. issue, issuewild or iodef')
    value = TextField('Property value')

    def output(self):
        flags, tag, value = self._values()
        return f'{flags} {tag} {quote(value)}'


register_type(CaaRdata)
