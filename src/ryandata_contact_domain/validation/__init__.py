from ryandata_contact_domain.validation.validators import (
    PhoneNumberAreaCodeValidator,
    RequiredAddressFieldsValidator,
    ZipStateValidator,
    create_default_validators,
    create_phone_number_validators,
)

__all__ = [
    "PhoneNumberAreaCodeValidator",
    "RequiredAddressFieldsValidator",
    "ZipStateValidator",
    "create_default_validators",
    "create_phone_number_validators",
]
