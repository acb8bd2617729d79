import hashlib
from pathlib import Path

_CHUNK_SIZE = 1024 * 64


def hash_file(file_path: Path) -> str:
    """Return the sha256 hex digest of a file, read in chunks."""
    sha = hashlib.sha256()
    with open(file_path, "rb") as f:
        while True:
            chunk = f.read(_CHUNK_SIZE)
            if not chunk:
                break
            sha.update(chunk)
    return sha.hexdigest()
