"""Shared models for commitgate."""
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field

class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    DX = "dx"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    WORKFLOW = "workflow"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    TYPES = "types"
    WIP = "wip"
    RELEASE = "release"
    DEPS = "deps"

class ConventionalHeader(BaseModel):
    revert: bool = False
    type: CommitType
    scope: Optional[str] = None
    subject: str = Field(description="The 1-50 characters matched after the ': ' separator")

class ValidationResult(BaseModel):
    message: str
    accepted: bool
    diagnostic: str = ""
    matched_by: Optional[str] = Field(default=None, description="'release' or 'conventional' when accepted")
    header: Optional[ConventionalHeader] = None

    model_config = {"frozen": True}

    @property
    def first_line(self) -> str:
        return self.message.split('\n', 1)[0]
