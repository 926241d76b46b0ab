"""Atomic snapshot persistence."""

import json
import logging
import os
import tempfile
from pathlib import Path

from build_snapshot.models import Snapshot

logger = logging.getLogger(__name__)


class SnapshotWriteError(OSError):
    """Raised when the snapshot cannot be written."""


def write_snapshot(snapshot: Snapshot, path: str | Path) -> Path:
    """Write the snapshot as JSON, replacing any previous file atomically.

    The document is written to a temporary file in the destination
    directory and moved into place, so readers see either the old or the
    new snapshot and never a partial one.

    Raises:
        SnapshotWriteError: If serialization or any filesystem step fails.
    """
    path = Path(path)
    tmp_path = None
    try:
        body = json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2)
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(body)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        # mkstemp creates 0600 files; the published snapshot must be world-readable
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
        tmp_path = None
    except (OSError, TypeError, ValueError) as e:
        raise SnapshotWriteError(f"Failed to write snapshot to {path}: {e}") from e
    finally:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)

    logger.info(
        "Wrote %s (%d topics, %d articles)",
        path,
        len(snapshot.topics),
        len(snapshot.articles_by_id),
    )
    return path
