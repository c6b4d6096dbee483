"""Project-facing publishing helpers.

`PublishingExtension` ties the dependency resolver, the plugin scanner and
the POM action to a project snapshot. `RepoExtension` looks up the
repository coordinates a build publishes to.
"""

from __future__ import annotations

from cthing_publishing.config import PublishingConfig
from cthing_publishing.dependencies import resolve_dependencies, scan_declared_plugins
from cthing_publishing.models import ProjectSnapshot
from cthing_publishing.pom import PomAction


SIGNING_KEY_ID_PROPERTY = "signing.keyId"
SIGNING_PASSWORD_PROPERTY = "signing.password"
SIGNING_RING_FILE_PROPERTY = "signing.secretKeyRingFile"
PLUGIN_PORTAL_KEY_PROPERTY = "gradle.publish.key"
PLUGIN_PORTAL_SECRET_PROPERTY = "gradle.publish.secret"


class PublishingExtension:
    def __init__(self, project: ProjectSnapshot, config: PublishingConfig | None = None) -> None:
        self.project = project
        self.config = config or PublishingConfig()

    def create_pom_action(self) -> PomAction:
        return PomAction(self.config, self.find_dependencies, self.find_gradle_plugins)

    def find_dependencies(self) -> list[str]:
        """Direct dependencies on organization artifacts.

        Both the build script configurations and the project configurations
        are searched. The former provide dependencies on organization Gradle
        plugins.
        """
        return resolve_dependencies(
            [self.project.buildscript_configurations, self.project.configurations],
            self.project.group,
            self.project.name,
            self.config.groups,
        )

    def find_gradle_plugins(self) -> list[str]:
        """Identifiers of the organization Gradle plugins created by the project."""
        return scan_declared_plugins(self.project.declared_plugins, self.config.groups)

    def can_sign(self) -> bool:
        """Whether the signing key id, password and secret key ring file are all defined."""
        return (
            self.project.has_property(SIGNING_KEY_ID_PROPERTY)
            and self.project.has_property(SIGNING_PASSWORD_PROPERTY)
            and self.project.has_property(SIGNING_RING_FILE_PROPERTY)
        )

    def has_gradle_plugin_portal_credentials(self) -> bool:
        return self.project.has_property(PLUGIN_PORTAL_KEY_PROPERTY) and self.project.has_property(
            PLUGIN_PORTAL_SECRET_PROPERTY
        )


class RepoExtension:
    """Access to the C Thing Software artifact repository properties."""

    USER_PROPERTY = "cthing.nexus.user"
    PASSWORD_PROPERTY = "cthing.nexus.password"
    DOWNLOAD_URL_PROPERTY = "cthing.nexus.downloadUrl"
    RELEASES_URL_PROPERTY = "cthing.nexus.releasesUrl"
    CANDIDATES_URL_PROPERTY = "cthing.nexus.candidatesUrl"
    SNAPSHOTS_URL_PROPERTY = "cthing.nexus.snapshotsUrl"
    APT_RELEASES_URL_PROPERTY = "cthing.nexus.aptReleasesUrl"
    APT_CANDIDATES_URL_PROPERTY = "cthing.nexus.aptCandidatesUrl"
    APT_SNAPSHOTS_URL_PROPERTY = "cthing.nexus.aptSnapshotsUrl"
    SITE_URL_PROPERTY = "cthing.nexus.sitesUrl"

    def __init__(self, project: ProjectSnapshot) -> None:
        self.project = project

    @property
    def user(self) -> str | None:
        return self.project.find_property(self.USER_PROPERTY)

    @property
    def password(self) -> str | None:
        return self.project.find_property(self.PASSWORD_PROPERTY)

    def has_credentials(self) -> bool:
        return self.project.has_property(self.USER_PROPERTY) and self.project.has_property(
            self.PASSWORD_PROPERTY
        )

    @property
    def download_url(self) -> str | None:
        return self.project.find_property(self.DOWNLOAD_URL_PROPERTY)

    @property
    def releases_url(self) -> str | None:
        return self.project.find_property(self.RELEASES_URL_PROPERTY)

    @property
    def candidates_url(self) -> str | None:
        return self.project.find_property(self.CANDIDATES_URL_PROPERTY)

    @property
    def snapshots_url(self) -> str | None:
        return self.project.find_property(self.SNAPSHOTS_URL_PROPERTY)

    @property
    def repo_url(self) -> str | None:
        """Snapshots URL for snapshot builds, release candidates URL otherwise.

        None when the project version carries no build information.
        """
        info = self.project.version_info
        if info is None:
            return None
        return self.snapshots_url if info.snapshot else self.candidates_url

    @property
    def apt_releases_url(self) -> str | None:
        return self.project.find_property(self.APT_RELEASES_URL_PROPERTY)

    @property
    def apt_candidates_url(self) -> str | None:
        return self.project.find_property(self.APT_CANDIDATES_URL_PROPERTY)

    @property
    def apt_snapshots_url(self) -> str | None:
        return self.project.find_property(self.APT_SNAPSHOTS_URL_PROPERTY)

    @property
    def site_url(self) -> str | None:
        return self.project.find_property(self.SITE_URL_PROPERTY)
