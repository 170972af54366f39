"""Pydantic models for Git Fame API requests and responses."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class FameRequest(BaseModel):
    """Request model for the fame endpoint."""

    repository: str = Field(
        ...,
        description="Absolute path of a local git repository",
        examples=["/srv/git/project"],
    )
    revision: str = Field(
        "HEAD",
        description="Revision to attribute",
        examples=["HEAD", "v1.0"],
    )
    order_by: Literal["lines", "commits", "files"] = Field(
        "lines",
        description="Primary ranking key",
    )
    use_committer: bool = Field(
        False,
        description="Credit lines to committers instead of authors",
    )
    extensions: List[str] = Field(default_factory=list, examples=[[".go", ".py"]])
    languages: List[str] = Field(default_factory=list, examples=[["go", "python"]])
    exclude: List[str] = Field(default_factory=list, examples=[["vendor/*"]])
    restrict_to: List[str] = Field(default_factory=list, examples=[["src/*"]])

    @field_validator("repository")
    @classmethod
    def repository_must_be_absolute(cls, v):
        """Only absolute local paths are accepted."""
        v = v.strip()
        if not v:
            raise ValueError("repository cannot be empty")
        if not (v.startswith("/") or (len(v) > 2 and v[1] == ":")):
            raise ValueError("repository must be an absolute path")
        return v

    @field_validator("revision")
    @classmethod
    def revision_must_not_be_empty(cls, v):
        """Reject blank revisions."""
        v = v.strip()
        if not v:
            raise ValueError("revision cannot be empty")
        return v


class ContributorModel(BaseModel):
    """One ranked contributor."""

    name: str
    lines: int
    commits: int
    files: int


class FameFilters(BaseModel):
    """Filters applied to the attributed tree."""

    extensions: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    exclude: List[str] = Field(default_factory=list)
    restrict_to: List[str] = Field(default_factory=list)


class FameData(BaseModel):
    """Payload of a successful fame response."""

    repository: str
    revision: str
    order_by: Literal["lines", "commits", "files"]
    identity: Literal["author", "committer"]
    filters: FameFilters
    contributors: List[ContributorModel]
    warnings: Optional[List[str]] = None


class FameResponse(BaseModel):
    """Success envelope for the fame endpoint."""

    ok: bool = Field(True, examples=[True])
    data: FameData


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])
    git_available: bool = Field(..., examples=[True])
    git_version: Optional[str] = Field(None, examples=["2.34.1"])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    git_version: Optional[str] = Field(None, examples=["2.34.1"])
    supported_features: list = Field(
        default_factory=lambda: [
            "line_attribution",
            "committer_identity",
            "extension_filters",
            "language_filters",
            "glob_filters",
        ]
    )
