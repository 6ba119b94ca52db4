"""Error classes with package identification.

Every error raised by the domain model is a PydanticCustomError, so it is
also a ValueError and is recorded faithfully when raised from inside a
pydantic validator. Three categories exist:

- RyanDataArgumentError: a required component is missing or malformed.
- RyanDataStateError: a composite is asked to validate while incomplete.
- RyanDataUnsupportedOperationError: a variant lacks a capability.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_contact_domain"

ARGUMENT_ERROR = "argument_error"
STATE_ERROR = "illegal_state"
UNSUPPORTED_OPERATION_ERROR = "unsupported_operation"


class RyanDataContactError(PydanticCustomError):
    """Base error for ryandata_contact_domain.

    Raised as ``Error(error_type, message, context)`` like any
    PydanticCustomError. Use :meth:`create` to build one with the package
    context filled in.
    """

    error_type: ClassVar[str] = "validation_error"

    @classmethod
    def create(cls, message: str, value: Any = None, **context: Any) -> RyanDataContactError:
        """Create an error of this category.

        Args:
            message: Fully formatted error message.
            value: The offending value, kept in the error context.
            **context: Additional context entries.

        Returns:
            Error instance ready to raise.
        """
        return cls(
            cls.error_type,
            message,
            {"package": PACKAGE_NAME, "value": value, **context},
        )

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataContactError:
        """Recover the domain error recorded inside a pydantic.ValidationError.

        Args:
            error: The ValidationError (or any exception) to convert.
            context: Additional context to include when no domain error is found.

        Returns:
            The first recorded domain error, or an argument error summarizing
            every message when none was recorded.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            for err_dict in error.errors():
                error_class = _ERROR_TYPES.get(err_dict.get("type", ""))
                if error_class is not None:
                    ctx = {"package": PACKAGE_NAME, **(err_dict.get("ctx") or {})}
                    return error_class(err_dict["type"], err_dict.get("msg", str(error)), ctx)

            error_messages = "; ".join(e.get("msg", str(e)) for e in error.errors())
            return RyanDataArgumentError(
                ARGUMENT_ERROR,
                error_messages,
                {"package": PACKAGE_NAME, **(context or {})},
            )

        return RyanDataArgumentError(
            ARGUMENT_ERROR,
            str(error),
            {"package": PACKAGE_NAME, **(context or {})},
        )


class RyanDataArgumentError(RyanDataContactError):
    """A required component is missing, blank or malformed."""

    error_type: ClassVar[str] = ARGUMENT_ERROR


class RyanDataStateError(RyanDataContactError):
    """A composite object is not in a valid state."""

    error_type: ClassVar[str] = STATE_ERROR


class RyanDataUnsupportedOperationError(RyanDataContactError):
    """The operation is not offered by this variant."""

    error_type: ClassVar[str] = UNSUPPORTED_OPERATION_ERROR


_ERROR_TYPES: dict[str, type[RyanDataContactError]] = {
    ARGUMENT_ERROR: RyanDataArgumentError,
    STATE_ERROR: RyanDataStateError,
    UNSUPPORTED_OPERATION_ERROR: RyanDataUnsupportedOperationError,
}


class RyanDataValidationError(Exception):
    """Exception wrapper for pydantic.ValidationError with package identification.

    Raised when serialized data handed to ``model_validate`` cannot be turned
    back into a domain object. Provides access to the original error while
    adding package context.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> RyanDataValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"RyanDataValidationError({self.original_error!r}, context={self.context})"
