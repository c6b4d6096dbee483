"""Find direct dependencies on organization artifacts.

The result is used in CI to determine which projects depend on which, so each
dependency is rendered in Gradle dependency notation:
`group:name:version[:classifier][@extension]`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from cthing_publishing.models import DEFAULT_EXTENSION, Artifact, Configuration, ResolvedDependency


logger = logging.getLogger(__name__)

GRADLE_PLUGIN_SUFFIX = ".gradle.plugin"


def is_gradle_plugin_marker(dep_name: str) -> bool:
    """Tell whether a dependency name denotes a Gradle plugin marker.

    Gradle resolves a plugin identifier through a marker module whose name
    ends in `.gradle.plugin` and whose only dependency is the plugin
    implementation artifact.
    """
    return dep_name.endswith(GRADLE_PLUGIN_SUFFIX)


def normalize_artifact_name(artifact_name: str) -> str:
    """Shorten an absolute artifact path to its file name.

    Some plugins (e.g. the IntelliJ Platform Gradle Plugin) use the absolute
    path of a file in the Gradle cache as the artifact name, which means
    nothing on other machines.
    """
    if artifact_name.startswith(os.sep):
        return Path(artifact_name).name
    return artifact_name


def format_dependency(group: str, version: str, artifact: Artifact) -> str:
    """Render one artifact of a dependency in Gradle notation.

    The classifier is appended when present. The extension is appended unless
    it is missing or the default `jar`; an empty extension is kept as a bare `@`.
    """
    notation = f"{group}:{normalize_artifact_name(artifact.name)}:{version}"
    if artifact.classifier is not None:
        notation += f":{artifact.classifier}"
    if artifact.extension is not None and artifact.extension != DEFAULT_EXTENSION:
        notation += f"@{artifact.extension}"
    return notation


def record_dependency(
    resolved: set[str],
    dependency: ResolvedDependency,
    *,
    self_group: str,
    self_name: str,
    recognized_groups: Iterable[str],
) -> None:
    """Add a dependency's artifacts to `resolved` if it is an organization artifact.

    Dependencies outside the recognized groups are ignored, as are
    dependencies on the project itself (e.g. the dependency analysis plugin
    creates those).
    """
    group = dependency.group
    if group not in set(recognized_groups):
        return
    if group == self_group and dependency.name == self_name:
        logger.debug("Skipping self dependency %s", dependency.compact())
        return

    for artifact in dependency.artifacts:
        resolved.add(format_dependency(group, dependency.version, artifact))


def resolve_dependencies(
    configuration_sources: Iterable[Iterable[Configuration]],
    self_group: str,
    self_name: str,
    recognized_groups: Iterable[str],
) -> list[str]:
    """Collect the direct dependencies on organization artifacts.

    Args:
        configuration_sources: Groups of configurations, typically the build
            script configurations followed by the project configurations. The
            former provide dependencies on organization Gradle plugins.
        self_group: Group of the project being published.
        self_name: Artifact name of the project being published.
        recognized_groups: Groups considered to belong to the organization.

    Returns:
        Sorted unique dependencies in Gradle notation. Empty if the project
        does not depend on any organization artifact.
    """
    groups = frozenset(recognized_groups)
    resolved: set[str] = set()

    def _record(dep: ResolvedDependency) -> None:
        record_dependency(
            resolved, dep, self_group=self_group, self_name=self_name, recognized_groups=groups
        )

    for source in configuration_sources:
        for config in source:
            if not config.can_be_resolved:
                logger.debug("Skipping unresolvable configuration %s", config.name)
                continue
            for dep in config.first_level_dependencies():
                if is_gradle_plugin_marker(dep.name):
                    # A marker only points at the implementation artifact one level down.
                    for child in dep.children:
                        _record(child)
                else:
                    _record(dep)

    return sorted(resolved)


def scan_declared_plugins(
    declared_ids: Iterable[str] | None,
    recognized_groups: Iterable[str],
) -> list[str]:
    """Return the declared plugin identifiers that belong to the organization.

    Args:
        declared_ids: Identifiers of the plugins the project creates, or None
            when the project does not develop Gradle plugins.
        recognized_groups: Group prefixes considered to belong to the organization.

    Returns:
        Sorted unique plugin identifiers starting with a recognized prefix.
    """
    if declared_ids is None:
        return []
    prefixes = tuple(recognized_groups)
    return sorted({plugin_id for plugin_id in declared_ids if plugin_id.startswith(prefixes)})
