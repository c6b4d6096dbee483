"""Publishing configuration module.

Configuration is read from environment variables.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from cthing_publishing.exceptions import ConfigError


DEFAULT_GROUPS = ("org.cthing", "com.cthing")
DEFAULT_ORG_NAME = "C Thing Software"
DEFAULT_ORG_URL = "https://www.cthing.com"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class PublishingConfig:
    """Publishing configuration container.

    Attributes:
        groups: Artifact groups (and plugin id prefixes) owned by the organization
        organization_name: Organization name written into the POM
        organization_url: Organization web site written into the POM
        log_level: Name of the logging level used by the command line tool
    """

    groups: frozenset[str] = field(default_factory=lambda: frozenset(DEFAULT_GROUPS))
    organization_name: str = DEFAULT_ORG_NAME
    organization_url: str = DEFAULT_ORG_URL
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "PublishingConfig":
        """Create configuration from environment variables.

        Environment variables:
            CTHING_GROUPS: Comma separated organization groups (default: "org.cthing,com.cthing")
            CTHING_ORG_NAME: Organization name (default: "C Thing Software")
            CTHING_ORG_URL: Organization URL (default: "https://www.cthing.com")
            CTHING_LOG_LEVEL: Logging level name (default: "WARNING")
        """
        raw_groups = os.getenv("CTHING_GROUPS")
        groups = (
            frozenset(g.strip() for g in raw_groups.split(",") if g.strip())
            if raw_groups is not None
            else frozenset(DEFAULT_GROUPS)
        )
        return cls(
            groups=groups,
            organization_name=os.getenv("CTHING_ORG_NAME", DEFAULT_ORG_NAME),
            organization_url=os.getenv("CTHING_ORG_URL", DEFAULT_ORG_URL),
            log_level=os.getenv("CTHING_LOG_LEVEL", "WARNING").upper(),
        )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ConfigError: If required configuration is missing or invalid.
        """
        if not self.groups:
            raise ConfigError("CTHING_GROUPS must name at least one group")
        if not self.organization_name:
            raise ConfigError("CTHING_ORG_NAME must not be empty")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Unsupported log level: {self.log_level}")
