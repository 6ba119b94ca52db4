"""Building blocks shared by every value object: errors, assertions, the
pydantic base model, described enums and the plugin factory.

Settings live in :mod:`ryandata_contact_domain.core.config`, which is not
imported here because it depends on the geo enumerations.
"""

from ryandata_contact_domain.core.assertions import (
    extract_digits,
    is_true,
    require,
    require_state,
    require_text,
)
from ryandata_contact_domain.core.enums import DescribedEnum
from ryandata_contact_domain.core.errors import (
    PACKAGE_NAME,
    RyanDataArgumentError,
    RyanDataContactError,
    RyanDataStateError,
    RyanDataUnsupportedOperationError,
    RyanDataValidationError,
)
from ryandata_contact_domain.core.factory import PluginFactory
from ryandata_contact_domain.core.model import DomainModel, nulls_first

__all__ = [
    "PACKAGE_NAME",
    "DescribedEnum",
    "DomainModel",
    "PluginFactory",
    "RyanDataArgumentError",
    "RyanDataContactError",
    "RyanDataStateError",
    "RyanDataUnsupportedOperationError",
    "RyanDataValidationError",
    "extract_digits",
    "is_true",
    "nulls_first",
    "require",
    "require_state",
    "require_text",
]
