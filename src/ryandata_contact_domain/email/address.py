"""Email addresses."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, field_validator

from ryandata_contact_domain.core.assertions import is_true, require, require_text
from ryandata_contact_domain.core.model import DomainModel
from ryandata_contact_domain.email.domain import Domain


class User(DomainModel):
    """The user part of an email address."""

    model_config = ConfigDict(frozen=True)

    name: str

    def __init__(self, name: str | None = None, **data: Any) -> None:
        super().__init__(name=name, **data)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        return require_text(value, "User name [%s] is required")

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.name,)

    def __str__(self) -> str:
        return self.name


_USER_REQUIRED = "User is required"
_DOMAIN_REQUIRED = "Domain is required"


class EmailAddress(DomainModel):
    """An email address, ``user@domain``.

    Email addresses sort by domain, then by username.

    Example:
        >>> email = EmailAddress.parse("jon@doe.com")
        >>> (email.username, email.domain_name)
        ('jon', 'doe.com')
    """

    model_config = ConfigDict(frozen=True)

    user: User
    domain: Domain

    def __init__(
        self, user: User | str | None = None, domain: Domain | str | None = None, **data: Any
    ) -> None:
        super().__init__(user=user, domain=domain, **data)

    @field_validator("user", mode="before")
    @classmethod
    def _validate_user(cls, value: Any) -> Any:
        require(value, _USER_REQUIRED)
        return User(value) if isinstance(value, str) else value

    @field_validator("domain", mode="before")
    @classmethod
    def _validate_domain(cls, value: Any) -> Any:
        require(value, _DOMAIN_REQUIRED)
        return Domain.parse(value) if isinstance(value, str) else value

    @classmethod
    def of(cls, user: User | str, domain: Domain | str) -> EmailAddress:
        return cls(user, domain)

    @classmethod
    def from_email_address(cls, email_address: EmailAddress | None) -> EmailAddress:
        require(email_address, "Email Address to copy is required")
        return cls(email_address.user, email_address.domain)

    @classmethod
    def parse(cls, email_address: str | None) -> EmailAddress:
        """Parse ``user@domain.ext``.

        Raises:
            RyanDataArgumentError: If the text is blank, has no user before
                the ``@`` or its domain cannot be parsed.
        """
        require_text(email_address, "Email Address [%s] to parse is required")
        index = email_address.find("@")
        is_true(
            index > 0,
            "Email Address [%s] format is not valid",
            email_address,
            value=email_address,
        )
        return cls(User(email_address[:index]), Domain.parse(email_address[index + 1 :]))

    @property
    def username(self) -> str:
        return self.user.name

    @property
    def domain_name(self) -> str:
        return str(self.domain)

    def _equality_key(self) -> tuple[Any, ...]:
        return (self.username, self.domain)

    def _sort_key(self) -> tuple[Any, ...]:
        return (self.domain, self.username)

    def __str__(self) -> str:
        return f"{self.username}@{self.domain_name}"
