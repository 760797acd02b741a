#
#
#

from .base import RdataMixin, readonly
from .fields import NameField, UnsignedField
from .registry import register_type


class MxRdata(RdataMixin):
    TYPE = readonly('MX')

    preference = UnsignedField(16, 'Lower values are preferred')
    exchange = NameField('Host willing to act as a mail exchange')

    def output(self):
        preference, exchange = self._values()
        return f'{preference} {exchange}'


register_type(MxRdata)


class SrvRdata(RdataMixin):
    '''
    RFC 2782 service location.
    '''

    TYPE = readonly('SRV')

    priority = UnsignedField(16)
    weight = UnsignedField(16)
    port = UnsignedField(16)
    target = NameField()

    def output(self):
        priority, weight, port, target = self._values()
        return f'{priority} {weight} {port} {target}'


register_type(SrvRdata)
