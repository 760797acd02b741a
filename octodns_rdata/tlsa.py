#
#
#

from .base import RdataMixin, readonly
from .fields import HexField, UnsignedField
from .registry import register_type


class TlsaRdata(RdataMixin):
    TYPE = readonly('TLSA')

    certificate_usage = UnsignedField(8)
    selector = UnsignedField(8)
    matching_type = UnsignedField(8)
    certificate_association_data = HexField()

    def output(self):
        return ' '.join(str(v) for v in self._values())


register_type(TlsaRdata)
