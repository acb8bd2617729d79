import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_dir_all(src: Path, dst: Path) -> None:
    """
    Recursively copy the contents of src into dst.

    dst and any missing parents are created. Directories are mirrored,
    everything else is copied byte for byte. A symlink to a directory is
    not followed as a directory and fails the copy. Existing files in dst
    are overwritten and nothing in dst is removed. Any I/O error
    propagates and leaves the partial copy in place.

    Args:
        src: Directory to copy from
        dst: Directory to copy into
    """
    src = Path(src)
    dst = Path(dst)
    dst.mkdir(parents=True, exist_ok=True)
    for entry in src.iterdir():
        target = dst / entry.name
        if entry.is_dir() and not entry.is_symlink():
            copy_dir_all(entry, target)
        else:
            logger.debug("Copying %s -> %s", entry, target)
            shutil.copy2(entry, target)
