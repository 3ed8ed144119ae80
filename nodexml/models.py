"""Pydantic models for build job configuration."""

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class BuildJob(BaseModel):
    """Entry in a jobs YAML file: one node tree rendered to one document."""

    key: str = Field(..., min_length=1, description="Identifier for the job.")
    input: Path = Field(..., description="JSON or YAML file holding the node tree.")
    output: Path = Field(..., description="Path the XML document is written to.")

    model_config = ConfigDict(extra="forbid")

    def resolved(self, base_dir: Path) -> "BuildJob":
        """Return a copy with relative paths anchored at ``base_dir``."""

        return self.model_copy(
            update={
                "input": self.input if self.input.is_absolute() else base_dir / self.input,
                "output": self.output if self.output.is_absolute() else base_dir / self.output,
            }
        )


class BuildPlan(BaseModel):
    """Collection of build jobs loaded from one file."""

    jobs: List[BuildJob] = Field(default_factory=list, description="Jobs in file order.")
