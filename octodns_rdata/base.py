#
#
#

from octodns.record.rr import Rr

from .exceptions import RdataIncompleteError
from .fields import Field


class readonly(object):
    '''
    Class level constant that instances can't overwrite.
    '''

    def __init__(self, value):
        self.value = value

    def __get__(self, instance, owner):
        return self.value

    def __set__(self, instance, value):
        raise AttributeError('TYPE is read-only')


def rdata_fields(cls):
    '''
    Names of the Field descriptors of cls in declaration order, which is the
    presentation order.
    '''
    try:
        return cls.__dict__['_field_names']
    except KeyError:
        pass
    names = []
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, Field) and name not in names:
                names.append(name)
    names = tuple(names)
    cls._field_names = names
    return names


class RdataMixin(object):
    '''
    Shared plumbing for record types: keyword construction through the
    validated setters, type identifier, completeness checks, equality and
    the octoDNS hand-off.
    '''

    TYPE = None

    def __init__(self, **fields):
        names = rdata_fields(self.__class__)
        for name, value in fields.items():
            if name not in names:
                raise TypeError(
                    f'{self.__class__.__name__} has no field "{name}"'
                )
            setattr(self, name, value)

    def type_identifier(self):
        return self.TYPE

    def missing(self):
        return [
            name
            for name in rdata_fields(self.__class__)
            if getattr(self, name) is None
        ]

    def _values(self):
        missing = self.missing()
        if missing:
            raise RdataIncompleteError(self.TYPE, missing)
        return tuple(
            getattr(self, name) for name in rdata_fields(self.__class__)
        )

    def to_rr(self, name, ttl):
        return Rr(name, self.TYPE, ttl, self.output())

    def __str__(self):
        return self.output()

    def __repr__(self):
        values = ', '.join(
            f'{name}={getattr(self, name)!r}'
            for name in rdata_fields(self.__class__)
        )
        return f'{self.__class__.__name__}<{values}>'

    def __eq__(self, other):
        if not isinstance(other, RdataMixin) or self.TYPE != other.TYPE:
            return NotImplemented
        names = rdata_fields(self.__class__)
        return all(getattr(self, n) == getattr(other, n) for n in names)

    __hash__ = None
