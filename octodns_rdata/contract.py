#
#
#

"""Protocol definition for RDATA values.

This module defines structural typing (PEP 544) for record data, so
serializers can accept any record type without requiring a common base
class.
"""

from typing import Protocol


class Rdata(Protocol):
    """Protocol every record type satisfies.

    Implementations in this package get the plumbing from RdataMixin, but
    anything with a TYPE and these two methods will do.
    """

    TYPE: str

    def type_identifier(self) -> str:
        """The RR type name, e.g. ``AAAA``; the same for every instance."""
        ...

    def output(self) -> str:
        """Render the presentation format text of this rdata.

        Returns:
            The fields in RFC order, without owner name, TTL or class

        Raises:
            RdataIncompleteError: If a required field is unset
        """
        ...
