"""Assembly of the production dishka container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ngestream.util.di import resolve_providers


def create_container(*, web: bool = True) -> AsyncContainer:
    """Build a container from the production variant of every provider.

    Args:
        web: Include the FastAPI request provider. Command line tools that
            resolve use cases outside a request pass False.
    """
    providers: list = resolve_providers()
    if web:
        providers.append(FastapiProvider())
    return make_async_container(*providers)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute handlers can resolve."""
    setup_dishka(container, app)
