#
#
#

from .base import RdataMixin, readonly
from .fields import NameField, UnsignedField
from .registry import register_type


class SoaRdata(RdataMixin):
    '''
    Start of authority, RFC 1035 section 3.3.13.

    The five timers are unsigned 32-bit values; ``rname`` is the responsible
    mailbox written as a domain name (``hostmaster.example.com.``).
    '''

    TYPE = readonly('SOA')

    mname = NameField('Primary name server for the zone')
    rname = NameField('Mailbox of the person responsible for the zone')
    serial = UnsignedField(32)
    refresh = UnsignedField(32)
    retry = UnsignedField(32)
    expire = UnsignedField(32)
    minimum = UnsignedField(32)

    def output(self):
        return ' '.join(str(v) for v in self._values())


register_type(SoaRdata)
