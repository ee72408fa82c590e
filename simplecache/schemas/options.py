"""Configuration model for FileStore."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormatType(str, Enum):
    """Serialization format. The value doubles as the file extension."""

    NATIVE = "py"
    JSON = "json"
    BINARY = "bin"


class StoreOptions(BaseModel):
    """Closed set of store options; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path = Field(default_factory=Path.cwd)
    filename: str = Field(default="classCache", min_length=1)
    type: FormatType = FormatType.NATIVE
    minify: bool = True

    @field_validator("path")
    @classmethod
    def _path_is_dir(cls, v: Path) -> Path:
        if not v.is_dir():
            raise ValueError(f'Dir "{v}" doesn\'t exist.')
        return v

    @property
    def extension(self) -> str:
        return self.type.value
