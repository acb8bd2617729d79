"""
Turn a staged directory into embeddable resources.

Two files are written to the output directory:

    generated.py  - a standalone module whose generate() returns a dict of
                    relative path -> Resource(data, modified, mime_type),
                    with every file's bytes embedded as a literal.
    files.json    - a human readable listing of the same files with size
                    and sha256 hash.
"""

import json
import logging
import mimetypes
from dataclasses import asdict, dataclass
from pathlib import Path

from frontend_embed.hashfile import hash_file
from frontend_embed.print_banner import banner

logger = logging.getLogger(__name__)

GENERATED_MODULE_NAME = "generated.py"
MANIFEST_NAME = "files.json"

_DEFAULT_MIME_TYPE = "application/octet-stream"

_MODULE_HEADER = '''"""Embedded static resources. Generated by frontend-embed, do not edit."""

from collections import namedtuple

Resource = namedtuple("Resource", ["data", "modified", "mime_type"])

RESOURCES = {
'''

_MODULE_FOOTER = '''}


def generate():
    return dict(RESOURCES)
'''


@dataclass
class ResourceEntry:
    name: str
    path: str
    size: int
    hash: str
    mime_type: str
    modified: int


def guess_mime_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or _DEFAULT_MIME_TYPE


class ResourceDir:
    """Collects every file below a staged directory for embedding."""

    def __init__(self, resource_dir: Path) -> None:
        self.resource_dir = Path(resource_dir)

    def iter_files(self) -> list[Path]:
        """All regular files below the resource dir, sorted by relative path."""
        if not self.resource_dir.is_dir():
            raise FileNotFoundError(
                f"Resource directory {self.resource_dir} does not exist"
            )
        files = [p for p in self.resource_dir.rglob("*") if p.is_file()]
        return sorted(files, key=lambda p: p.relative_to(self.resource_dir).as_posix())

    def entries(self) -> list[ResourceEntry]:
        out: list[ResourceEntry] = []
        for file_path in self.iter_files():
            rel = file_path.relative_to(self.resource_dir).as_posix()
            stat = file_path.stat()
            entry = ResourceEntry(
                name=file_path.name,
                path=rel,
                size=stat.st_size,
                hash=hash_file(file_path),
                mime_type=guess_mime_type(file_path),
                modified=int(stat.st_mtime),
            )
            logger.debug("Resource %s (%d bytes, %s)", rel, entry.size, entry.mime_type)
            out.append(entry)
        return out

    def build(self, out_dir: Path) -> list[ResourceEntry]:
        """
        Write generated.py and files.json into out_dir.

        Args:
            out_dir: Directory to write into, created if missing

        Returns:
            The manifest entries, sorted by path

        Raises:
            FileNotFoundError: If the resource directory does not exist
        """
        entries = self.entries()
        print(banner(f"Generating {len(entries)} resources from {self.resource_dir}"))
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        module_path = out_dir / GENERATED_MODULE_NAME
        with open(module_path, "w", encoding="utf-8") as f:
            f.write(_MODULE_HEADER)
            for entry in entries:
                data = (self.resource_dir / entry.path).read_bytes()
                f.write(
                    f"    {entry.path!r}: Resource({data!r}, {entry.modified}, {entry.mime_type!r}),\n"
                )
            f.write(_MODULE_FOOTER)

        manifest_json_str = json.dumps(
            [asdict(e) for e in entries], indent=2, sort_keys=True
        )
        with open(out_dir / MANIFEST_NAME, "w", encoding="utf-8") as f:
            f.write(manifest_json_str)

        print(f"Wrote {module_path}")
        return entries


def resource_dir(path: Path) -> ResourceDir:
    return ResourceDir(path)
