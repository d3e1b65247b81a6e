"""AOT cache feature mode model."""

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FeatureState(str, Enum):
    """Operating mode of the AOT cache for a single run."""

    DISABLED = "disabled"
    CREATE = "create"
    USE = "use"


_LABELS = {
    FeatureState.DISABLED: "NONE",
    FeatureState.CREATE: "CREATE (first run)",
    FeatureState.USE: "USE (reusing cache)",
}


class FeatureMode(BaseModel):
    """Detected AOT cache mode and the cache path it refers to."""

    model_config = ConfigDict(frozen=True)

    state: FeatureState = Field(default=FeatureState.DISABLED, description="Cache mode")
    path: str | None = Field(default=None, description="Cache path (None when disabled)")

    @model_validator(mode="after")
    def validate_disabled_has_no_path(self) -> Self:
        """Disabled mode never carries a path."""
        if self.state is FeatureState.DISABLED and self.path is not None:
            raise ValueError("disabled feature mode cannot carry a path")
        return self

    @property
    def enabled(self) -> bool:
        return self.state is not FeatureState.DISABLED

    @property
    def label(self) -> str:
        """Human-readable mode name used in reports."""
        return _LABELS[self.state]

    @classmethod
    def disabled(cls) -> "FeatureMode":
        return cls()
