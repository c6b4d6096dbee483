"""Load resolved project snapshots from JSON files."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from cthing_publishing.exceptions import SnapshotNotFoundError, SnapshotParseError
from cthing_publishing.models import ProjectSnapshot


def load_project(path: str | Path) -> ProjectSnapshot:
    """Load a project snapshot.

    Notes:
        - The snapshot describes dependencies that the build tool has already
          resolved. Nothing is downloaded here.
        - A relative `root_dir` is taken relative to the snapshot file. When
          missing, the snapshot's own directory is the project root.

    Args:
        path: Path to the snapshot JSON file.

    Raises:
        SnapshotNotFoundError: If the file does not exist.
        SnapshotParseError: If the file cannot be read or does not describe a project.

    Returns:
        The validated project snapshot.
    """
    snapshot_path = Path(path)
    if not snapshot_path.exists():
        raise SnapshotNotFoundError(f"Project snapshot not found: {snapshot_path}")
    try:
        text = snapshot_path.read_text(encoding="utf-8")
        project = ProjectSnapshot.model_validate_json(text)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        raise SnapshotParseError(f"Failed to load project snapshot: {snapshot_path}") from exc

    base_dir = snapshot_path.resolve().parent
    if project.root_dir is None:
        root_dir = base_dir
    elif project.root_dir.is_absolute():
        root_dir = project.root_dir
    else:
        root_dir = base_dir / project.root_dir
    return project.model_copy(update={"root_dir": root_dir})
