"""Fixture factory for tests that resolve services from the container."""

import pytest_asyncio

from ngestream.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Return a fixture yielding a request-scoped container.

    Each test gets a fresh container, so the in-memory store starts empty.
    Repositories and services resolved within one test share that store:

        unit_env = create_env_fixture()

        async def test_reply_is_nested(unit_env):
            repo = await unit_env.get(CommentRepository)
            use_case = await unit_env.get(GetCommentTreeUseCase)

    Pass ``unmock={"persistence"}`` to run against Postgres instead.
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
