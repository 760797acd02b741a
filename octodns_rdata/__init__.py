#
#
#

from .address import AaaaRdata, ARdata
from .base import RdataMixin
from .contract import Rdata
from .dnssec import DnskeyRdata, DsRdata, NsecRdata, RrsigRdata
from .exceptions import (
    RdataException,
    RdataIncompleteError,
    RdataOutOfRangeError,
    RdataUnknownType,
    RdataValidationError,
)
from .registry import get_type, new, register_type, registered_types
from .service import MxRdata, SrvRdata
from .soa import SoaRdata
from .target import CnameRdata, DnameRdata, NsRdata, PtrRdata
from .text import CaaRdata, TxtRdata
from .tlsa import TlsaRdata

__version__ = '0.1.0'

__all__ = [
    'ARdata',
    'AaaaRdata',
    'CaaRdata',
    'CnameRdata',
    'DnameRdata',
    'DnskeyRdata',
    'DsRdata',
    'MxRdata',
    'NsRdata',
    'NsecRdata',
    'PtrRdata',
    'Rdata',
    'RdataException',
    'RdataIncompleteError',
    'RdataMixin',
    'RdataOutOfRangeError',
    'RdataUnknownType',
    'RdataValidationError',
    'RrsigRdata',
    'SoaRdata',
    'SrvRdata',
    'TlsaRdata',
    'TxtRdata',
    'get_type',
    'new',
    'register_type',
    'registered_types',
]
