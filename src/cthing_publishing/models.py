"""Pydantic models for resolved dependencies, SCM URLs and project snapshots."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_EXTENSION = "jar"


class Artifact(BaseModel):
    """A file published by a resolved module."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    classifier: str | None = None
    extension: str | None = None


class ResolvedDependency(BaseModel):
    """A resolved module together with its artifacts and direct children."""

    model_config = ConfigDict(frozen=True)

    group: str
    name: str = Field(..., min_length=1)
    version: str
    artifacts: list[Artifact] = Field(default_factory=list)
    children: list[ResolvedDependency] = Field(default_factory=list)

    def compact(self) -> str:
        """Return a compact string representation.

        Returns:
            A string like `group:name:version`.
        """
        return f"{self.group}:{self.name}:{self.version}"


class Configuration(BaseModel):
    """A named dependency configuration of a project.

    Only configurations that can be resolved carry meaningful first-level
    dependencies. Declaration-only configurations are skipped by the resolver.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    can_be_resolved: bool = True
    dependencies: list[ResolvedDependency] = Field(default_factory=list)

    def first_level_dependencies(self) -> list[ResolvedDependency]:
        return list(self.dependencies)


class ScmUrls(BaseModel):
    """The SCM URLs derived from a Git remote URL."""

    model_config = ConfigDict(frozen=True)

    original: str
    read_only: str
    read_write: str
    browse: str


class VersionInfo(BaseModel):
    """Build information attached to the project version."""

    build_date: str
    build_number: str
    snapshot: bool = False


class ProjectSnapshot(BaseModel):
    """An already-resolved description of the project being published."""

    group: str
    name: str = Field(..., min_length=1)
    version: str = "unspecified"
    description: str | None = None
    root_dir: Path | None = None
    properties: dict[str, str] = Field(default_factory=dict)
    version_info: VersionInfo | None = None
    buildscript_configurations: list[Configuration] = Field(default_factory=list)
    configurations: list[Configuration] = Field(default_factory=list)
    # None means the project applies no plugin development facility.
    declared_plugins: list[str] | None = None

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def find_property(self, key: str) -> str | None:
        return self.properties.get(key)
