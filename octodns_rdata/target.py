#
#
#

from .base import RdataMixin, readonly
from .fields import NameField
from .registry import register_type


class _TargetRdata(RdataMixin):
    target = NameField('Domain name the record points at')

    def output(self):
        (target,) = self._values()
        return target


class CnameRdata(_TargetRdata):
    TYPE = readonly('CNAME')


register_type(CnameRdata)


class DnameRdata(_TargetRdata):
    TYPE = readonly('DNAME')


register_type(DnameRdata)


class NsRdata(_TargetRdata):
    TYPE = readonly('NS')


register_type(NsRdata)


class PtrRdata(_TargetRdata):
    TYPE = readonly('PTR')


register_type(PtrRdata)
