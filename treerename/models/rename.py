"""Rename request and outcome data models."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from treerename.messages import BLANK_PATH_MESSAGE, BLANK_TARGET_MESSAGE


class RenameRequest(BaseModel):
    """Parameters of a single recursive rename invocation."""

    model_config = ConfigDict(frozen=True)

    root_path: str = Field(description="Directory to walk")
    match_name: str = Field(
        description="Exact file name to look for; blank matches every file",
        default="",
    )
    target_name: str = Field(description="New file name (without directory path)")

    @field_validator("root_path")
    @classmethod
    def _check_root_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(BLANK_PATH_MESSAGE)
        return value

    @field_validator("target_name")
    @classmethod
    def _check_target_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(BLANK_TARGET_MESSAGE)
        separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
        if any(sep in value for sep in separators) or value in (".", ".."):
            raise ValueError(f"New file name must be a bare file name, got '{value}'")
        return value

    @property
    def matches_any_file(self) -> bool:
        """Whether every file is a candidate (no filter given)."""
        return not self.match_name.strip()

    def matches(self, file_name: str) -> bool:
        """Check a file name against the filter (exact and case-sensitive)."""
        return self.matches_any_file or file_name == self.match_name

    def __str__(self) -> str:
        return f"RenameRequest('{self.root_path}', '{self.match_name}' -> '{self.target_name}')"


class RenameOutcome(BaseModel):
    """Log and match status of a rename over a directory subtree."""

    log: list[str] = Field(
        description="Found and renamed events in traversal order",
        default_factory=list,
    )
    matched: bool = Field(
        description="Whether any file satisfied the filter in the subtree",
        default=False,
    )
    renamed: int = Field(description="Number of files actually renamed", default=0, ge=0)

    def merge(self, other: "RenameOutcome") -> "RenameOutcome":
        """Combine with the outcome of a later part of the walk.

        Logs are concatenated in order and ``matched`` is true if either side
        matched, so a sibling subtree without a match never clears it.
        """
        return RenameOutcome(
            log=[*self.log, *other.log],
            matched=self.matched or other.matched,
            renamed=self.renamed + other.renamed,
        )

    def __len__(self) -> int:
        return len(self.log)
