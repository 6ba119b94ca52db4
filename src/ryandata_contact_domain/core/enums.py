"""Enum base for types carrying an abbreviation and a description."""

from __future__ import annotations

from enum import Enum
from typing import Self

from ryandata_contact_domain.core.errors import RyanDataArgumentError


class DescribedEnum(str, Enum):
    """String enum whose value is an abbreviation, with a description attached.

    Members are declared as ``NAME = ("ABBR", "Description")``; the value is
    the abbreviation, so members serialize as their abbreviation.

    Example:
        >>> class Size(DescribedEnum):
        ...     SMALL = ("S", "Small")
        >>> Size.from_abbreviation("s") is Size.SMALL
        True
    """

    def __new__(cls, abbreviation: str, description: str) -> Self:
        member = str.__new__(cls, abbreviation)
        member._value_ = abbreviation
        member._description = description
        return member

    @property
    def abbreviation(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return self._description

    @classmethod
    def _not_found_message(cls, abbreviation: str | None) -> str:
        return f"{cls.__name__} for abbreviation [{abbreviation}] was not found"

    @classmethod
    def find_by_abbreviation(cls, abbreviation: str | None) -> Self | None:
        """Case-insensitive lookup returning None when nothing matches."""
        if not abbreviation:
            return None
        wanted = abbreviation.strip().upper()
        for member in cls:
            if member.abbreviation.upper() == wanted:
                return member
        return None

    @classmethod
    def from_abbreviation(cls, abbreviation: str | None) -> Self:
        """Look up a member by abbreviation, ignoring case.

        Raises:
            RyanDataArgumentError: If no member has the given abbreviation.
        """
        member = cls.find_by_abbreviation(abbreviation)
        if member is None:
            raise RyanDataArgumentError.create(cls._not_found_message(abbreviation), abbreviation)
        return member

    @classmethod
    def find_by_description(cls, description: str | None) -> Self | None:
        """Case-insensitive lookup on description or member name."""
        if not description:
            return None
        wanted = description.strip().upper()
        for member in cls:
            if member.description.upper() == wanted or member.name == wanted:
                return member
        return None

    @classmethod
    def from_description(cls, description: str | None) -> Self:
        """Look up a member by description or name, ignoring case.

        Raises:
            RyanDataArgumentError: If nothing matches.
        """
        member = cls.find_by_description(description)
        if member is None:
            raise RyanDataArgumentError.create(
                f"{cls.__name__} for description [{description}] was not found", description
            )
        return member

    @classmethod
    def find(cls, text: str | None) -> Self | None:
        """Match ``text`` against abbreviations first, then descriptions."""
        return cls.find_by_abbreviation(text) or cls.find_by_description(text)

    def __str__(self) -> str:
        return self.description
