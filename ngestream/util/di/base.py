"""Shared base for dishka providers.

Each provider in ``PROVIDERS`` has a production variant and, when it is
tagged with a component, a test double living under ``tests/di``. The
tags below let the test container swap doubles back out for the real
thing (e.g. to run repository tests against Postgres).
"""

from typing import ClassVar, Literal

from dishka import Provider

# Only the store is swapped out in tests; config, domain and application
# providers are the same everywhere.
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying the component tag and mock flag used by ``get_provider``."""

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
