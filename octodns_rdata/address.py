#
#
#

from .base import RdataMixin, readonly
from .fields import Ipv4Field, Ipv6Field
from .registry import register_type


class ARdata(RdataMixin):
    TYPE = readonly('A')

    address = Ipv4Field('IPv4 address, stored exactly as given')

    def output(self):
        (address,) = self._values()
        return address


register_type(ARdata)


class AaaaRdata(RdataMixin):
    TYPE = readonly('AAAA')

    address = Ipv6Field('IPv6 address, stored exactly as given')

    def output(self):
        # no normalization, what was set is what comes out
        (address,) = self._values()
        return address


register_type(AaaaRdata)
