from ryandata_contact_domain.parsers.base import BaseAddressParser, ParseResult
from ryandata_contact_domain.parsers.factory import ParserFactory
from ryandata_contact_domain.parsers.usaddress_parser import USAddressParser

__all__ = [
    "BaseAddressParser",
    "ParseResult",
    "ParserFactory",
    "USAddressParser",
]
