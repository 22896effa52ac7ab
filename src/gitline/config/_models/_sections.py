"""Configuration section models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from gitline.config._models._common import LogFormat, LogLevel
from gitline.summary import BranchLabels, SymbolTable


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty disables file logging).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.JSON
    file: str = ""


class SymbolsConfig(BaseModel):
    """Glyphs used in the change token.

    ``renamed`` defaults to the same glyph as ``modified``; set it to
    something else to tell the two counts apart.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    staged: str = Field(default="^", min_length=1)
    renamed: str = Field(default="~", min_length=1)
    modified: str = Field(default="~", min_length=1)
    deleted: str = Field(default="-", min_length=1)
    untracked: str = Field(default="+", min_length=1)
    clean: str = Field(default="✓", min_length=1)
    separator: str = ""

    def to_table(self) -> SymbolTable:
        """Convert to the formatter's symbol table."""
        return SymbolTable(**self.model_dump())


class LabelsConfig(BaseModel):
    """Text shown in place of a branch name."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    detached: str = "HEAD"
    unborn: str = "(no branch)"

    def to_labels(self) -> BranchLabels:
        """Convert to the formatter's branch labels."""
        return BranchLabels(detached=self.detached, unborn=self.unborn)
