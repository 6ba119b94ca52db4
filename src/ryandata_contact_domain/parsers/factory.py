from __future__ import annotations

from typing import ClassVar

from ryandata_contact_domain.core.factory import PluginFactory
from ryandata_contact_domain.protocols import AddressParserProtocol


class ParserFactory(PluginFactory[str, AddressParserProtocol]):
    """Factory for creating address parser instances by name.

    Example:
        >>> parser = ParserFactory.create("usaddress")

        # Register a custom parser
        >>> ParserFactory.register("canada_post", CanadaPostParser)
    """

    _registry: ClassVar[dict[str, type[AddressParserProtocol]]] = {}
    _default_type: ClassVar[str] = "usaddress"
    _entity_name: ClassVar[str] = "parser"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "usaddress" not in cls._registry:
            from ryandata_contact_domain.parsers.usaddress_parser import USAddressParser

            cls._registry["usaddress"] = USAddressParser
