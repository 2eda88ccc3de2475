"""Base model for feed records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Records are created once and never edited, so every model is frozen.
    """

    model_config = ConfigDict(frozen=True)
