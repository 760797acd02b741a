#
#
#

"""Validated field descriptors shared by all record types.

A field validates on assignment and stores the accepted value on the
instance; a rejected value raises before anything is written, so the
previous value (or ``None`` when unset) is kept.
"""

from base64 import b64encode
from collections.abc import Sequence

from .exceptions import RdataOutOfRangeError, RdataValidationError
from .validator import (
    is_integer,
    is_valid_base64,
    is_valid_domain_name,
    is_valid_hex,
    is_valid_ipv4_address,
    is_valid_ipv6_address,
    is_valid_rr_type,
    is_valid_unsigned,
)


class Field(object):
    def __init__(self, doc=None):
        self.__doc__ = doc
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name
        self._attr = f'_{name}'

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.__dict__.get(self._attr)

    def __set__(self, instance, value):
        instance.__dict__[self._attr] = self.clean(value)

    def clean(self, value):
        '''
        Returns the value to store or raises RdataValidationError. The base
        field only insists on a str.
        '''
        if not isinstance(value, str):
            raise RdataValidationError(self.name, value, 'not a string')
        return value

    def validate(self, value):
        '''
        Returns a list of reasons value would be rejected, empty when it
        would be accepted.
        '''
        try:
            self.clean(value)
        except RdataValidationError as e:
            return [str(e)]
        return []


class _GrammarField(Field):
    _check = None
    _reason = None

    def clean(self, value):
        if not self._check(value):
            raise RdataValidationError(self.name, value, self._reason)
        return value


class Ipv4Field(_GrammarField):
    _check = staticmethod(is_valid_ipv4_address)
    _reason = 'not a valid IPv4 address'


class Ipv6Field(_GrammarField):
    _check = staticmethod(is_valid_ipv6_address)
    _reason = 'not a valid IPv6 address'


class NameField(_GrammarField):
    _check = staticmethod(is_valid_domain_name)
    _reason = 'not a valid domain name'


class RrTypeField(_GrammarField):
    _check = staticmethod(is_valid_rr_type)
    _reason = 'not a valid RR type'


class HexField(_GrammarField):
    _check = staticmethod(is_valid_hex)
    _reason = 'not valid hexadecimal data'


class Base64Field(Field):
    '''
    Binary data kept as its base64 text. Raw bytes are accepted and encoded,
    whitespace in text is dropped so the value stays a single token.
    '''

    def clean(self, value):
        if isinstance(value, (bytes, bytearray)):
            if not value:
                raise RdataValidationError(self.name, value, 'empty')
            return b64encode(value).decode('ascii')
        if not is_valid_base64(value):
            raise RdataValidationError(self.name, value, 'not valid base64')
        return ''.join(value.split())


class TextField(Field):
    def __init__(self, doc=None, allow_empty=True):
        super().__init__(doc)
        self.allow_empty = allow_empty

    def clean(self, value):
        value = super().clean(value)
        if not value and not self.allow_empty:
            raise RdataValidationError(self.name, value, 'empty')
        try:
            value.encode('utf-8')
        except UnicodeEncodeError:
            raise RdataValidationError(
                self.name, value, 'not encodable as UTF-8'
            )
        return value


class UnsignedField(Field):
    def __init__(self, bits, doc=None, minimum=0, maximum=None):
        super().__init__(doc)
        self.bits = bits
        self.minimum = minimum
        self.maximum = 2**bits - 1 if maximum is None else maximum

    def clean(self, value):
        if not is_integer(value):
            raise RdataValidationError(self.name, value, 'not an integer')
        if not (
            is_valid_unsigned(value, self.bits)
            and self.minimum <= value <= self.maximum
        ):
            raise RdataOutOfRangeError(
                self.name, value, self.minimum, self.maximum
            )
        return value


class RrTypeListField(Field):
    '''
    A non-empty sequence of RR type mnemonics, stored as a tuple.
    '''

    def clean(self, value):
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise RdataValidationError(
                self.name, value, 'not a sequence of RR types'
            )
        if not value:
            raise RdataValidationError(self.name, value, 'empty')
        for _type in value:
            if not is_valid_rr_type(_type):
                raise RdataValidationError(
                    self.name, _type, 'not a valid RR type'
                )
        return tuple(value)
