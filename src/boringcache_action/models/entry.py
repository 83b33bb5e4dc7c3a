"""Cache entry and cache configuration models."""

from __future__ import annotations

from typing import Any, Literal, Self, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EntrySide: TypeAlias = Literal["restore", "save"]


class CacheEntry(BaseModel):
    """A named cache location with a restore-side and a save-side path.

    Built by the entry parser from one comma-delimited segment. When no
    explicit save path is given, ``save_path`` equals ``restore_path``.
    """

    tag: str = Field(min_length=1)
    restore_path: str
    save_path: str = ""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def default_save_path(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("save_path"):
            data = {**data, "save_path": data.get("restore_path", "")}
        return data

    @field_validator("tag")
    @classmethod
    def tag_not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "tag cannot be empty"
            raise ValueError(msg)
        return value

    @property
    def redirected(self) -> bool:
        """Whether the entry restores and saves at different paths."""
        return self.restore_path != self.save_path

    def path_for(self, side: EntrySide) -> str:
        return self.restore_path if side == "restore" else self.save_path

    def render(self, side: EntrySide) -> str:
        """Render as ``tag:path`` for the given side."""
        return f"{self.tag}:{self.path_for(side)}"


class CacheConfig(BaseModel):
    """Resolved workspace and decorated key for one invocation."""

    workspace: str
    full_key: str
    platform_suffix: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("workspace")
    @classmethod
    def workspace_has_namespace(cls, value: str) -> str:
        if "/" not in value:
            msg = f"workspace {value!r} must be in 'namespace/name' form"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def key_carries_suffix(self) -> Self:
        if self.platform_suffix and not self.full_key.endswith(self.platform_suffix):
            msg = f"full key {self.full_key!r} does not end with {self.platform_suffix!r}"
            raise ValueError(msg)
        return self

    @property
    def base_key(self) -> str:
        """The key before platform decoration."""
        if not self.platform_suffix:
            return self.full_key
        return self.full_key[: -len(self.platform_suffix)]
