"""Best-effort filesystem helpers.

Every delete and write in the reset flow goes through these: a missing
target is skipped silently, any other OSError is logged and the caller
moves on to the next item.
"""

import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Optional
from logger import get_logger

logger = get_logger()


def remove_path(path: Path, label: Optional[str] = None) -> bool:
    """Delete a file or directory tree if it exists.

    Args:
        path: File or directory to remove.
        label: Name used in log lines (defaults to the path).

    Returns:
        True if something was removed, False if absent or removal failed.
    """
    label = label or str(path)

    # is_symlink first so a dangling link still counts as present
    if not path.is_symlink() and not path.exists():
        return False

    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
            logger.info(f"  ✓ Deleted directory: {label}")
        else:
            path.unlink()
            logger.info(f"  ✓ Deleted file: {label}")
        return True
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.error(f"  ✗ Failed to delete {label}: {e}")
        return False


@contextmanager
def best_effort(description: str):
    """Run a block, logging and suppressing any OSError it raises.

    Args:
        description: What the block does, used in the failure log line.
    """
    try:
        yield
    except OSError as e:
        logger.error(f"  ✗ Failed {description}: {e}")


def recreate_dir(path: Path, label: Optional[str] = None) -> bool:
    """Empty a directory by deleting and recreating it.

    Returns:
        True if the directory exists afterwards.
    """
    remove_path(path, label)
    with best_effort(f"to create {label or path}"):
        path.mkdir(parents=True, exist_ok=True)
    return path.is_dir()
