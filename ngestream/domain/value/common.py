"""Base for small immutable values passed between layers."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Equal when every field is equal; hashable so it can key a dict."""

    model_config = ConfigDict(frozen=True)
