"""Base model for domain value objects.

DomainModel is a pydantic BaseModel that:

- re-raises the domain error recorded by a field validator instead of a
  pydantic.ValidationError, so constructors fail with the same error as the
  ``of``/``parse`` factories;
- defines equality, hashing and natural ordering from two hooks,
  ``_equality_key()`` and ``_sort_key()``, scoped to a value "kind"
  (``_kind()``) so that unrelated value types never compare equal;
- provides ``clone()`` and a dict round trip (``to_dict``/``from_dict``).
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from ryandata_contact_domain.core.errors import RyanDataContactError, RyanDataValidationError


@total_ordering
class DomainModel(BaseModel):
    """Base class for every value object and composite in the package."""

    model_config = ConfigDict(extra="ignore")

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as error:
            raise RyanDataContactError.from_validation_error(error) from None

    @classmethod
    def _kind(cls) -> type[DomainModel]:
        """Root type whose instances are comparable with one another."""
        return cls

    def _equality_key(self) -> tuple[Any, ...]:
        raise NotImplementedError

    def _sort_key(self) -> tuple[Any, ...]:
        return self._equality_key()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, self._kind()):
            return NotImplemented
        return self._equality_key() == other._equality_key()

    def __hash__(self) -> int:
        return hash((self._kind().__name__, self._equality_key()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, self._kind()):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def clone(self) -> Self:
        """Return an equal, independent copy of this object."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Deserialize from the output of :meth:`to_dict`.

        Raises:
            RyanDataValidationError: If ``data`` does not describe a valid object.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as error:
            raise RyanDataValidationError.from_validation_error(
                error, {"model": cls.__name__}
            ) from error


def nulls_first(value: Any) -> tuple[bool, Any]:
    """Sort key component that orders None before any value."""
    return (value is not None, value if value is not None else 0)
