#
#
#

import logging

from .exceptions import RdataException, RdataUnknownType

log = logging.getLogger('RdataRegistry')

_CLASSES = {}


def register_type(_class):
    _type = _class.TYPE
    existing = _CLASSES.get(_type)
    if existing is not None and existing is not _class:
        raise RdataException(
            f'Type "{_type}" already registered by {existing.__name__}'
        )
    log.debug('register_type: _type=%s, class=%s', _type, _class.__name__)
    _CLASSES[_type] = _class
    return _class


def registered_types():
    return sorted(_CLASSES.keys())


def get_type(_type):
    try:
        return _CLASSES[_type.upper()]
    except (AttributeError, KeyError):
        raise RdataUnknownType(_type)


def new(_type, **fields):
    '''
    Builds rdata of the given type, each of fields assigned through its
    validated setter.
    '''
    _class = get_type(_type)
    log.debug('new: _type=%s, fields=%s', _class.TYPE, sorted(fields))
    return _class(**fields)
