"""Base for entities read from and written to the stores."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable snapshot of a stored record.

    Changing a comment, profile or subscription goes through its repository;
    an instance is never mutated in place, so the same object can be shared
    between a thread snapshot and the rows rendered from it.
    """

    model_config = ConfigDict(frozen=True)
