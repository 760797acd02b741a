#
#
#

from octodns.record.exception import RecordException


class RdataException(RecordException):
    pass


class RdataValidationError(RdataException):
    def __init__(self, field, value, reason):
        super().__init__(f'{field}: "{value}" is {reason}')
        self.field = field
        self.value = value
        self.reason = reason


class RdataOutOfRangeError(RdataValidationError):
    def __init__(self, field, value, minimum, maximum):
        super().__init__(
            field, value, f'out of range, must be {minimum}-{maximum}'
        )
        self.minimum = minimum
        self.maximum = maximum


class RdataIncompleteError(RdataException):
    def __init__(self, _type, missing):
        fields = ', '.join(missing)
        super().__init__(f'{_type} rdata is missing field(s): {fields}')
        self._type = _type
        self.missing = tuple(missing)


class RdataUnknownType(RdataException):
    def __init__(self, _type):
        super().__init__(f'Unknown rdata type "{_type}"')
        self._type = _type
