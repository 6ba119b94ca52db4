"""Non-raising validators for addresses and phone numbers.

Unlike ``validate()`` on the models themselves, these validators collect
every problem into a ValidationResult, so a batch of parsed addresses can be
checked without stopping at the first failure.
"""

from __future__ import annotations

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_contact_domain.core.errors import RyanDataArgumentError
from ryandata_contact_domain.geo.address import Address
from ryandata_contact_domain.geo.usa.address import UnitedStatesAddress
from ryandata_contact_domain.geo.usa.repository import StateZipCodesRepository
from ryandata_contact_domain.phone.number import PhoneNumber
from ryandata_contact_domain.phone.usa import StateAreaCodesRepository, UnitedStatesPhoneNumber


class RequiredAddressFieldsValidator(BaseValidator[Address]):
    """Checks that street, city, postal code and country are set."""

    @property
    def name(self) -> str:
        return "required_address_fields"

    def validate(self, address: Address) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        for field, label in (
            ("street", "Street"),
            ("city", "City"),
            ("postal_code", "Postal Code"),
            ("country", "Country"),
        ):
            if getattr(address, field) is None:
                result.add_error(field=field, message=f"{label} is required", value=None)
        return result


class ZipStateValidator(BaseValidator[Address]):
    """Checks that a United States address's ZIP code lies in its state.

    Addresses outside the United States, and addresses missing a state or
    ZIP, pass; :class:`RequiredAddressFieldsValidator` reports missing fields.
    """

    def __init__(self, repository: StateZipCodesRepository | None = None) -> None:
        self._repository = repository or StateZipCodesRepository.get_instance()

    @property
    def name(self) -> str:
        return "zip_state"

    def validate(self, address: Address) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if not isinstance(address, UnitedStatesAddress):
            return result

        zip_code = address.zip
        if address.state is None or zip_code is None:
            return result

        regions = self._repository.find_zip_ranges_by(address.state)
        if regions and not any(region.contains(zip_code) for region in regions):
            result.add_error(
                field="zip_code",
                message=f"ZIP code {zip_code} is not in {address.state.abbreviation}",
                value=str(zip_code),
            )
        return result


class PhoneNumberAreaCodeValidator(BaseValidator[PhoneNumber]):
    """Checks that a United States phone number's area code belongs to a state."""

    def __init__(self, repository: StateAreaCodesRepository | None = None) -> None:
        self._repository = repository or StateAreaCodesRepository.get_instance()

    @property
    def name(self) -> str:
        return "phone_number_area_code"

    def validate(self, phone_number: PhoneNumber) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if not isinstance(phone_number, UnitedStatesPhoneNumber):
            return result
        try:
            self._repository.find_state_by(phone_number.area_code)
        except RyanDataArgumentError as error:
            result.add_error(
                field="area_code", message=error.message(), value=str(phone_number.area_code)
            )
        return result


def create_default_validators(check_zip_state: bool = True) -> CompositeValidator[Address]:
    """Create the address validation pipeline.

    Args:
        check_zip_state: If True, include the ZIP/state consistency check.

    Returns:
        CompositeValidator with the address validators configured.
    """
    builder: ValidatorPipelineBuilder[Address] = ValidatorPipelineBuilder("address_validation")
    builder.add(RequiredAddressFieldsValidator())
    if check_zip_state:
        builder.add(ZipStateValidator())
    return builder.build()


def create_phone_number_validators() -> CompositeValidator[PhoneNumber]:
    """Create the phone number validation pipeline."""
    builder: ValidatorPipelineBuilder[PhoneNumber] = ValidatorPipelineBuilder(
        "phone_number_validation"
    )
    builder.add(PhoneNumberAreaCodeValidator())
    return builder.build()
