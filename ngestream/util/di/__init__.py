"""Dishka providers and the rules for picking production or test variants."""

from typing import Type

from ngestream.util.di.application import ProdApplicationProvider
from ngestream.util.di.base import Component, ProviderBase
from ngestream.util.di.core import ProdConfigProvider
from ngestream.util.di.domain import ProdDomainProvider
from ngestream.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable: a test double is registered as a subclass under tests/di
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    ``base`` is returned unchanged when nothing subclasses it. Otherwise the
    subclass whose ``__is_mock__`` flag equals ``use_mock`` is returned.

    Raises:
        ValueError: If no subclass has the requested flag (typically because
            the test doubles module was never imported)
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if getattr(variant, "__is_mock__", False) == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} provider registered for {component}")


def swappable_components() -> set[Component]:
    """Components that have more than one provider variant."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def resolve_providers(mocked: set[Component] | None = None) -> list[ProviderBase]:
    """Instantiate every provider, using test doubles for ``mocked`` components."""
    mocked = mocked or set()
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "resolve_providers",
    "swappable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
