"""Parse results and the base class for full-line address parsers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from abstract_validation_base import ProcessEntry, ProcessLog, ValidationResult

from ryandata_contact_domain.geo.address import Address

if TYPE_CHECKING:
    from abstract_validation_base import CompositeValidator

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of parsing one address line.

    Holds either the parsed address or the error that stopped parsing,
    along with a ProcessLog of the normalizations applied on the way.
    """

    raw_input: str
    address: Address | None = None
    error: Exception | None = None
    validation: ValidationResult | None = None
    process_log: ProcessLog = field(default_factory=ProcessLog)

    @property
    def is_parsed(self) -> bool:
        return self.error is None and self.address is not None

    @property
    def is_valid(self) -> bool:
        """Parsed, and passed validation when a validator ran."""
        if not self.is_parsed:
            return False
        if self.validation is not None:
            return self.validation.is_valid
        return True

    def to_dict(self) -> dict[str, Any] | None:
        return self.address.to_dict() if self.address is not None else None

    def add_process_error(self, field: str, message: str, value: Any = None) -> None:
        entry = ProcessEntry(
            entry_type="error",
            field=field,
            message=message,
            original_value=str(value) if value is not None else None,
        )
        self.process_log.errors.append(entry)

    def add_process_cleaning(
        self, field: str, original_value: Any, new_value: Any, reason: str
    ) -> None:
        """Record a component that was normalized while composing the address."""
        entry = ProcessEntry(
            entry_type="cleaning",
            field=field,
            message=reason,
            original_value=str(original_value) if original_value is not None else None,
            new_value=str(new_value) if new_value is not None else None,
            context={"operation_type": "normalization"},
        )
        self.process_log.cleaning.append(entry)


class BaseAddressParser(ABC):
    """Abstract base class for address parsers.

    Provides common error handling, logging, optional validation and batch
    processing. Subclasses implement :meth:`_parse_impl`.
    """

    def __init__(self, validator: CompositeValidator[Address] | None = None) -> None:
        self._validator = validator
        self._parse_count = 0
        self._error_count = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this parser implementation."""
        ...

    @abstractmethod
    def _parse_impl(self, address_string: str, result: ParseResult) -> Address:
        """Parse ``address_string``, logging normalizations to ``result``.

        Raises:
            ValueError: If the address cannot be composed; domain errors are
                ValueErrors.
        """
        ...

    def parse(self, address_string: str) -> ParseResult:
        """Parse a single address line, never raising for bad input."""
        self._parse_count += 1
        result = ParseResult(raw_input=address_string)

        try:
            result.address = self._parse_impl(address_string, result)
        except ValueError as e:
            self._error_count += 1
            logger.warning("Failed to parse address: %s - %s", address_string[:50], e)
            result.error = e
            result.add_process_error("address", str(e), address_string)
            return result

        logger.debug("Successfully parsed address: %s", address_string[:50])
        if self._validator is not None:
            result.validation = self._validator.validate(result.address)
        return result

    def parse_batch(self, addresses: Sequence[str]) -> list[ParseResult]:
        return [self.parse(address) for address in addresses]

    @property
    def stats(self) -> dict[str, int]:
        return {
            "parse_count": self._parse_count,
            "error_count": self._error_count,
        }

    def reset_stats(self) -> None:
        self._parse_count = 0
        self._error_count = 0
