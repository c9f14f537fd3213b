# gitease Configuration Schema
# Pydantic models for YAML configuration validation

from pydantic import BaseModel, Field, field_validator


class GitConfig(BaseModel):
    """Defaults for the git workflows."""

    remote: str = Field(default="origin", description="Remote used for fetch and push")
    default_source_branch: str = Field(default="main", description="Source branch for new-branch")

    @field_validator("remote", "default_source_branch")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject empty names."""
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class OutputConfig(BaseModel):
    """Console output configuration."""

    verbose: bool = Field(default=False, description="Echo git commands and show git stderr")
    colored: bool = Field(default=True, description="Enable colored output")


class GiteaseConfig(BaseModel):
    """Root configuration model for gitease."""

    git: GitConfig = Field(default_factory=GitConfig, description="Git workflow settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
