from ryandata_contact_domain.phone.codes import (
    AreaCode,
    ExchangeCode,
    Extension,
    FourDigitNumber,
    LineNumber,
)
from ryandata_contact_domain.phone.generic import GenericPhoneNumber
from ryandata_contact_domain.phone.number import (
    PhoneNumber,
    PhoneNumberBuilder,
    PhoneNumberType,
    set_phone_extension,
)
from ryandata_contact_domain.phone.usa import StateAreaCodesRepository, UnitedStatesPhoneNumber

__all__ = [
    "AreaCode",
    "ExchangeCode",
    "Extension",
    "FourDigitNumber",
    "GenericPhoneNumber",
    "LineNumber",
    "PhoneNumber",
    "PhoneNumberBuilder",
    "PhoneNumberType",
    "StateAreaCodesRepository",
    "UnitedStatesPhoneNumber",
    "set_phone_extension",
]
