"""Internet domains, e.g. ``vmware.com``."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import ConfigDict, field_validator

from ryandata_contact_domain.core.assertions import is_true, require, require_text
from ryandata_contact_domain.core.model import DomainModel


class DomainExtension(str, Enum):
    """Well-known top-level domain extensions."""

    BIZ = "biz"
    CO = "co"
    COM = "com"
    DE = "de"
    EDU = "edu"
    GOV = "gov"
    INFO = "info"
    IO = "io"
    ME = "me"
    NET = "net"
    ORG = "org"
    SITE = "site"
    UK = "uk"
    US = "us"
    XYZ = "xyz"

    @classmethod
    def find(cls, name: str | None) -> DomainExtension | None:
        """Find the extension a (domain) name ends with, ignoring case."""
        if name is None or not name.strip():
            return None
        name = name.strip().lower()
        return next((extension for extension in cls if name.endswith(extension.value)), None)


class Domain(DomainModel):
    """A domain name split into its name and extension.

    Example:
        >>> domain = Domain.parse("vmware.com")
        >>> (domain.name, domain.extension_name, domain.extension)
        ('vmware', 'com', <DomainExtension.COM: 'com'>)
    """

    model_config = ConfigDict(frozen=True)

    name: str
    extension_name: str

    def __init__(
        self,
        name: str | None = None,
        extension_name: str | DomainExtension | None = None,
        **data: Any,
    ) -> None:
        super().__init__(name=name, extension_name=extension_name, **data)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        return require_text(value, "Name [%s] is required")

    @field_validator("extension_name", mode="before")
    @classmethod
    def _validate_extension_name(cls, value: Any) -> str:
        if isinstance(value, DomainExtension):
            return value.value
        return require_text(value, "Extension [%s] is required")

    @classmethod
    def of(cls, name: str, extension: str | DomainExtension) -> Domain:
        return cls(name, extension)

    @classmethod
    def from_domain(cls, domain: Domain | None) -> Domain:
        require(domain, "Domain to copy is required")
        return cls(domain.name, domain.extension_name)

    @classmethod
    def parse(cls, domain_name: str | None) -> Domain:
        """Split ``domain_name`` at its last dot.

        Raises:
            RyanDataArgumentError: If ``domain_name`` is blank or has no name
                before its last dot.
        """
        require_text(domain_name, "Domain Name [%s] to parse is required")
        index = domain_name.rfind(".")
        is_true(index > 0, "Domain Name [%s] format is not valid", domain_name, value=domain_name)
        return cls(domain_name[:index], domain_name[index + 1 :])

    @property
    def extension(self) -> DomainExtension | None:
        return DomainExtension.find(self.extension_name)

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.name.lower(), self.extension_name.lower())

    def _sort_key(self) -> tuple[Any, ...]:
        return (self.extension_name.lower(), self.name.lower())

    def __str__(self) -> str:
        return f"{self.name}.{self.extension_name}"
