from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from ryandata_contact_domain.parsers.base import ParseResult
    from ryandata_contact_domain.phone.codes import Extension


@runtime_checkable
class AddressParserProtocol(Protocol):
    """Protocol for full-line address parsing implementations.

    Implementations should parse raw address strings into structured
    Address objects, handling errors gracefully.
    """

    def parse(self, address_string: str) -> ParseResult:
        """Parse a single address string.

        Args:
            address_string: Raw address string to parse.

        Returns:
            ParseResult containing the parsed address or error information.
        """
        ...

    def parse_batch(self, addresses: Sequence[str]) -> list[ParseResult]:
        """Parse multiple address strings.

        Args:
            addresses: Sequence of raw address strings to parse.

        Returns:
            List of ParseResult objects, one for each input address.
        """
        ...


@runtime_checkable
class SupportsExtension(Protocol):
    """Protocol for phone numbers whose extension can be changed.

    Not every phone number variant offers this; use
    :func:`~ryandata_contact_domain.phone.number.set_phone_extension` to set
    an extension on a phone number of unknown variant.
    """

    def set_extension(self, extension: Extension | None) -> None:
        """Set or clear the extension."""
        ...

    def with_extension(self, extension: Extension | None) -> Self:
        """Set or clear the extension, returning the phone number."""
        ...
