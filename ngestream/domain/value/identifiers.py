"""Strongly typed identifiers for NgeStream domain entities."""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
UserId = NewType("UserId", UUID)

# TMDB ids are numeric but comments key them as strings ("550", "tv-1399" ...)
MovieId = NewType("MovieId", str)
