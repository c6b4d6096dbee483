"""Populate POM metadata with C Thing Software publishing information.

The metadata is assembled into pydantic models. Writing the POM itself is
left to the build tool.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from cthing_publishing.config import PublishingConfig
from cthing_publishing.models import ProjectSnapshot
from cthing_publishing.scm import PomScm


BUILD_DATE_PROPERTY = "cthing.build.date"
BUILD_NUMBER_PROPERTY = "cthing.build.number"
DEPENDENCIES_PROPERTY = "cthing.dependencies"
GRADLE_PLUGINS_PROPERTY = "cthing.gradle.plugins"


class PomLicense(Enum):
    """Licenses used by C Thing Software projects.

    The name is the SPDX identifier where one exists, otherwise a user
    defined `LicenseRef-` identifier.
    """

    ASL2 = ("Apache-2.0", "https://www.apache.org/licenses/LICENSE-2.0")
    GPL2 = ("GPL-2.0-only", "https://www.gnu.org/licenses/old-licenses/gpl-2.0-standalone.html")
    INTERNAL = ("LicenseRef-CTHING-internal", "https://www.cthing.com/licenses/internal.txt")
    JETBRAINS = ("LicenseRef-JETBRAINS-toolbox", "https://www.jetbrains.com/store/license_personal.html")
    MIT = ("MIT", "https://opensource.org/license/mit")

    @property
    def spdx_name(self) -> str:
        return self.value[0]

    @property
    def url(self) -> str:
        return self.value[1]


class PomCISystem(str, Enum):
    NONE = "none"
    GITHUB_ACTIONS = "github-actions"
    CTHING_JENKINS = "cthing-jenkins"


class PomDeveloper(BaseModel):
    """A project developer."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str

    def __str__(self) -> str:
        return self.id


DEFAULT_DEVELOPER = PomDeveloper(id="baron", name="Baron Roberts", email="baron@cthing.com")


class PomOrganization(BaseModel):
    name: str
    url: str


class PomLicenseEntry(BaseModel):
    name: str
    url: str


class PomDeveloperEntry(BaseModel):
    id: str
    name: str
    email: str
    organization: str
    organization_url: str


class PomScmEntry(BaseModel):
    connection: str
    developer_connection: str
    url: str


class PomIssueManagement(BaseModel):
    system: str
    url: str


class PomCIManagement(BaseModel):
    system: str
    url: str | None = None


class PomMetadata(BaseModel):
    """The publishing information for a project's POM."""

    name: str
    description: str | None = None
    url: str | None = None
    organization: PomOrganization
    licenses: list[PomLicenseEntry] = Field(default_factory=list)
    developers: list[PomDeveloperEntry] = Field(default_factory=list)
    scm: PomScmEntry | None = None
    issue_management: PomIssueManagement | None = None
    ci_management: PomCIManagement | None = None
    properties: dict[str, str] = Field(default_factory=dict)


class PomAction:
    """Fills in POM metadata for a project.

    Defaults to the Apache 2.0 license, GitHub Actions CI and a single
    developer. Developers are unique by id and kept in id order.
    """

    def __init__(
        self,
        config: PublishingConfig,
        find_dependencies: Callable[[], list[str]],
        find_gradle_plugins: Callable[[], list[str]],
    ) -> None:
        self._config = config
        self._find_dependencies = find_dependencies
        self._find_gradle_plugins = find_gradle_plugins
        self.license = PomLicense.ASL2
        self.ci_system = PomCISystem.GITHUB_ACTIONS
        self._developers: dict[str, PomDeveloper] = {DEFAULT_DEVELOPER.id: DEFAULT_DEVELOPER}

    @property
    def developers(self) -> list[PomDeveloper]:
        return [self._developers[dev_id] for dev_id in sorted(self._developers)]

    def set_license(self, license: PomLicense) -> PomAction:
        self.license = license
        return self

    def set_ci_system(self, ci_system: PomCISystem) -> PomAction:
        self.ci_system = ci_system
        return self

    def set_developers(self, developers: Iterable[PomDeveloper]) -> PomAction:
        """Replace the developers. An empty iterable clears them."""
        self._developers = {}
        for developer in developers:
            self.add_developer(developer)
        return self

    def add_developer(self, developer: PomDeveloper) -> PomAction:
        # First developer registered under an id wins.
        self._developers.setdefault(developer.id, developer)
        return self

    def execute(self, project: ProjectSnapshot) -> PomMetadata:
        """Build the POM metadata for the project.

        SCM, issue management and GitHub Actions CI entries are only filled
        in when the project's Git repository has a remote URL.
        """
        org_name = self._config.organization_name
        org_url = self._config.organization_url
        scm = PomScm(project.root_dir or Path.cwd())

        metadata = PomMetadata(
            name=project.name,
            description=project.description,
            url=scm.browse,
            organization=PomOrganization(name=org_name, url=org_url),
            licenses=[PomLicenseEntry(name=self.license.spdx_name, url=self.license.url)],
            developers=[
                PomDeveloperEntry(
                    id=dev.id,
                    name=dev.name,
                    email=dev.email,
                    organization=org_name,
                    organization_url=org_url,
                )
                for dev in self.developers
            ],
        )

        if scm.urls is not None:
            metadata.scm = PomScmEntry(
                connection=scm.urls.read_only,
                developer_connection=scm.urls.read_write,
                url=scm.urls.browse,
            )
            metadata.issue_management = PomIssueManagement(
                system="GitHub Issues", url=scm.urls.browse + "/issues"
            )

        if self.ci_system is PomCISystem.GITHUB_ACTIONS:
            if scm.urls is not None:
                metadata.ci_management = PomCIManagement(
                    system="GitHub Actions", url=scm.urls.browse + "/actions"
                )
        elif self.ci_system is PomCISystem.CTHING_JENKINS:
            metadata.ci_management = PomCIManagement(system=f"{org_name} Jenkins")

        if project.version_info is not None:
            metadata.properties[BUILD_DATE_PROPERTY] = project.version_info.build_date
            metadata.properties[BUILD_NUMBER_PROPERTY] = project.version_info.build_number

        dependencies = self._find_dependencies()
        if dependencies:
            metadata.properties[DEPENDENCIES_PROPERTY] = " ".join(dependencies)

        plugins = self._find_gradle_plugins()
        if plugins:
            metadata.properties[GRADLE_PLUGINS_PROPERTY] = " ".join(plugins)

        return metadata
