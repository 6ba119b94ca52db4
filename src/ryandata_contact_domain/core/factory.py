"""Generic plugin factory base class.

Provides a reusable factory pattern for creating instances from a registry
of registered types, keyed by any hashable value (a name, a Country, ...).
Subclasses specify the default key, an optional fallback key and how to
register defaults.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any, ClassVar, Generic, TypeVar

from ryandata_contact_domain.core.errors import RyanDataArgumentError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


class PluginFactory(ABC, Generic[K, T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses should define:
        - _registry: Class-level dict mapping keys to implementation classes
        - _default_type: The key to use when none is specified
        - _fallback_type: Key used for unregistered keys, or None to fail
        - _entity_name: Human-readable name for error messages (e.g., "parser")
        - _ensure_defaults_registered(): Method to register default implementations

    Example subclass:
        class ParserFactory(PluginFactory[str, AddressParserProtocol]):
            _registry: ClassVar[dict[str, type[AddressParserProtocol]]] = {}
            _default_type: ClassVar[str] = "usaddress"
            _entity_name: ClassVar[str] = "parser"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                if "usaddress" not in cls._registry:
                    from ... import USAddressParser
                    cls._registry["usaddress"] = USAddressParser
    """

    _registry: ClassVar[dict[Any, type[Any]]]
    _default_type: ClassVar[Any]
    _fallback_type: ClassVar[Any] = None
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default implementations are registered.

        Subclasses must implement this to lazily register their default
        implementations. This method is called before registry access.
        """
        ...

    @classmethod
    def register(cls, key: K, impl_class: type[T]) -> None:
        """Register an implementation type.

        Args:
            key: Key for the implementation.
            impl_class: Implementation class.
        """
        cls._ensure_defaults_registered()
        cls._registry[key] = impl_class
        logger.debug("Registered %s %s for %s", cls._entity_name, impl_class.__name__, key)

    @classmethod
    def unregister(cls, key: K) -> None:
        """Unregister an implementation type.

        Args:
            key: Key to unregister.
        """
        cls._registry.pop(key, None)

    @classmethod
    def resolve(cls, key: K | None = None) -> type[T]:
        """Get the implementation class registered for ``key``.

        Args:
            key: Key to resolve. If None, uses the default type.

        Returns:
            The registered class, or the fallback type's class when ``key``
            is unknown and the factory has a fallback.

        Raises:
            RyanDataArgumentError: If the key is not registered and there is
                no fallback.
        """
        cls._ensure_defaults_registered()

        type_key = key if key is not None else cls._default_type

        if type_key in cls._registry:
            return cls._registry[type_key]

        if cls._fallback_type is not None and cls._fallback_type in cls._registry:
            logger.debug(
                "No %s registered for %s; using %s", cls._entity_name, type_key, cls._fallback_type
            )
            return cls._registry[cls._fallback_type]

        available = ", ".join(sorted(str(k) for k in cls._registry))
        raise RyanDataArgumentError.create(
            f"Unknown {cls._entity_name} type: {type_key}. Available types: {available}",
            type_key,
        )

    @classmethod
    def create(cls, key: K | None = None, **kwargs: Any) -> T:
        """Create an instance of the implementation registered for ``key``.

        Args:
            key: Key to create. If None, uses the default type.
            **kwargs: Arguments to pass to the constructor.

        Returns:
            Instance of the requested type.
        """
        return cls.resolve(key)(**kwargs)

    @classmethod
    def available_types(cls) -> list[K]:
        """Get list of registered keys, sorted by their string form."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys(), key=str)
