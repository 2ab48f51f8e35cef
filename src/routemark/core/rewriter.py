import contextlib
import logging
import os
import shutil
import tempfile
from pathlib import Path

from routemark.errors import WriteFailure

logger = logging.getLogger(__name__)


def atomic_write(path: Path, content: str) -> None:
    """Replace *path* with *content* via a sibling temp file and ``os.replace``."""
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as temp_file:
            temp_name = temp_file.name
            temp_file.write(content.encode("utf-8"))
            temp_file.flush()
            os.fsync(temp_file.fileno())
        if path.exists():
            shutil.copymode(path, temp_name)
        os.replace(temp_name, path)
    except OSError as exc:
        if temp_name is not None:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(temp_name)
        raise WriteFailure(path, exc.strerror or str(exc)) from exc


def maybe_write(path: Path, original_content: str, new_content: str, dry_run: bool = False) -> bool:
    """Write *new_content* if it differs from *original_content*.

    Returns True whenever the content differs, including dry runs where
    nothing is written.
    """
    if new_content == original_content:
        return False
    if dry_run:
        logger.debug("Dry run, not writing %s", path)
    else:
        atomic_write(path, new_content)
        logger.debug("Wrote %s", path)
    return True
