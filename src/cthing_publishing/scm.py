"""Derive POM SCM URLs from the remote configured in a Git repository."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import SplitResult, urlsplit

from cthing_publishing.exceptions import ScmUrlError
from cthing_publishing.models import ScmUrls


logger = logging.getLogger(__name__)

_REMOTE_SECTION_RE = re.compile(r'\s*\[remote\s+".+"]')
_SECTION_START_RE = re.compile(r"\s*\[")
_REMOTE_URL_RE = re.compile(r"\s*url\s*=\s*(.*?)\s*")
_GIT_EXTENSION_RE = re.compile(r"\.git$")
_WHITESPACE_RE = re.compile(r"\s")

GIT_CONFIG_PATH = Path(".git") / "config"


def parse_remote(lines: Iterable[str]) -> str | None:
    """Find the URL of the first remote section in Git config lines.

    The scan has two states. Outside a remote section every line except a
    `[remote "..."]` header is ignored. Inside it, the first `url = ...`
    line wins, and any other section header ends the search.

    Args:
        lines: Lines of a Git config file.

    Returns:
        The remote URL, or None if the first remote section has no url key
        or there is no remote section at all.
    """
    in_remote_section = False
    for line in lines:
        line = line.rstrip("\r\n")
        if not in_remote_section:
            if _REMOTE_SECTION_RE.fullmatch(line):
                in_remote_section = True
            continue

        if _SECTION_START_RE.match(line):
            return None

        m = _REMOTE_URL_RE.fullmatch(line)
        if m and m.group(1):
            return m.group(1)
    return None


def read_remote_url(config_path: Path) -> str | None:
    """Read a Git config file and return its first remote URL.

    A missing or unreadable file is reported as no remote. Publishing must
    not fail just because the SCM information cannot be determined.
    """
    if not config_path.exists():
        return None
    try:
        with config_path.open(encoding="utf-8") as fh:
            return parse_remote(fh)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Ignoring unreadable Git config %s: %s", config_path, exc)
        return None


def normalize_remote_url(url: str) -> str:
    """Rewrite a Git remote URL into standard URI form.

    Rules:
      - `/abs/path` => `file:///abs/path`
      - `git@host:path` => `ssh://git@host/path`
      - `git+ssh://...` => `ssh://...`
      - anything else is returned unchanged
    """
    if url.startswith("/"):
        return "file://" + url
    if url.startswith("git@"):
        return "ssh://" + url.replace(":", "/", 1)
    if url.startswith("git+ssh:"):
        return "ssh:" + url[len("git+ssh:"):]
    return url


def _split_remote(normalized: str) -> tuple[SplitResult, str, int | None]:
    """Split a normalized remote URL into its parts.

    Args:
        normalized: Output of `normalize_remote_url`.

    Raises:
        ScmUrlError: If the string is not a usable URI.

    Returns:
        The split URL, the host as written, and the port (None when absent).
    """
    if _WHITESPACE_RE.search(normalized):
        raise ScmUrlError(f"Invalid Git remote URL (contains whitespace): {normalized!r}")
    try:
        parts = urlsplit(normalized)
        port = parts.port
    except ValueError as exc:
        raise ScmUrlError(f"Invalid Git remote URL: {normalized!r}") from exc
    if not parts.scheme:
        raise ScmUrlError(f"Invalid Git remote URL (no scheme): {normalized!r}")

    # urlsplit lowercases `hostname`, so take the host from the netloc as written.
    host = parts.netloc.rpartition("@")[2]
    if port is not None or host.endswith(":"):
        host = host.rsplit(":", 1)[0]
    if not host and parts.scheme != "file":
        raise ScmUrlError(f"Invalid Git remote URL (no host): {normalized!r}")
    return parts, host, port


def derive_scm_urls(original_url: str) -> ScmUrls:
    """Compute the read-only, read-write and browse URLs for a Git remote.

    Raises:
        ScmUrlError: If the remote URL is not a valid URI.
    """
    normalized = normalize_remote_url(original_url)
    parts, host, port = _split_remote(normalized)
    scheme = parts.scheme
    path = parts.path

    read_write = "scm:git:" + normalized
    if scheme == "ssh":
        read_only = "scm:git:git://" + host + ("" if port is None else f":{port}") + path
    else:
        read_only = read_write

    if scheme == "file":
        browse = normalized
    else:
        browse = "https://" + host + _GIT_EXTENSION_RE.sub("", path, count=1)

    return ScmUrls(original=original_url, read_only=read_only, read_write=read_write, browse=browse)


def resolve_scm_urls(remote_config_text: str) -> ScmUrls | None:
    """Derive the SCM URLs from the text of a Git config file.

    Returns:
        The derived URLs, or None when the config names no remote URL.
    """
    original_url = parse_remote(remote_config_text.splitlines())
    if original_url is None:
        return None
    return derive_scm_urls(original_url)


class PomScm:
    """SCM information for the Git repository rooted at a project directory.

    The config file is read once on construction. All accessors return None
    when no remote URL was found.
    """

    def __init__(self, root_dir: Path) -> None:
        self._original_url = read_remote_url(Path(root_dir) / GIT_CONFIG_PATH)
        self._urls = None if self._original_url is None else derive_scm_urls(self._original_url)

    @property
    def is_present(self) -> bool:
        return self._original_url is not None

    @property
    def urls(self) -> ScmUrls | None:
        return self._urls

    @property
    def original_url(self) -> str | None:
        return self._original_url

    @property
    def read_only(self) -> str | None:
        """URL for the POM SCM `connection` tag."""
        return self._urls.read_only if self._urls else None

    @property
    def read_write(self) -> str | None:
        """URL for the POM SCM `developerConnection` tag."""
        return self._urls.read_write if self._urls else None

    @property
    def browse(self) -> str | None:
        """URL for the POM SCM `url` tag."""
        return self._urls.browse if self._urls else None

    def __str__(self) -> str:
        return "<empty>" if self._original_url is None else self._original_url

    def __repr__(self) -> str:
        return f"PomScm({self._original_url!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._original_url == other._original_url

    def __hash__(self) -> int:
        return hash(self._original_url)
