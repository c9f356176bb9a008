#!/usr/bin/env python3
"""Print a movie's comment thread the way the watch page lays it out.

Usage:
    python scripts/show_thread.py <movie_id> [--token JWT] [--expand-all]
"""

import argparse
import asyncio
import sys

from ngestream.application.thread import CommentThreadFactory
from ngestream.application.usecase.auth import ResolveActorUseCase
from ngestream.config import Settings
from ngestream.domain.service import iter_nodes
from ngestream.util.di.container import create_container
from ngestream.util.logging import setup_logging
from ngestream.util.observability import configure_logfire

INDENT = "    "


async def show(movie_id: str, token: str | None, expand_all: bool) -> int:
    container = create_container(web=False)
    try:
        async with container() as request_container:
            resolve_actor = await request_container.get(ResolveActorUseCase)
            factory = await request_container.get(CommentThreadFactory)

            actor = await resolve_actor.execute(token)
            thread = factory.create(movie_id, actor)
            if not await thread.synchronize():
                for notice in thread.drain_notices():
                    print(f"{notice.title}: {notice.message}", file=sys.stderr)
                return 1

            if expand_all:
                for node in iter_nodes(thread.forest):
                    if node.replies:
                        thread.toggle_expanded(node.id)

            print(f"Comments ({thread.total})")
            for row in thread.rows():
                prefix = INDENT * row.indent
                edited = " (edited)" if row.edited else ""
                print(f"{prefix}{row.author.display_name}{edited}")
                for line in row.node.comment.comment.splitlines():
                    print(f"{prefix}  {line}")
                if row.reply_label and not row.is_expanded:
                    print(f"{prefix}  [{row.reply_label}]")
            return 0
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("movie_id")
    parser.add_argument("--token", default=None, help="Access token of the viewer")
    parser.add_argument("--expand-all", action="store_true")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    return asyncio.run(show(args.movie_id, args.token, args.expand_all))


if __name__ == "__main__":
    sys.exit(main())
