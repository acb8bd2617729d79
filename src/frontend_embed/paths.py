import platform
from pathlib import Path

# Defaults mirror the layout of a crate that sits one level below the
# frontend project: <ui>/crate/ is the working directory of the build.
DEFAULT_UI_DIR = "../"
DEFAULT_STATIC_DIR = "target/generated"
DEFAULT_OUT_DIR = "target/resources"
DEFAULT_DIRECTIVE_PREFIX = "cargo:"

LOCK_FILE_NAME = ".frontend-embed.lock"


def default_npm_cmd() -> str:
    """npm ships as a batch wrapper on Windows."""
    if platform.system() == "Windows":
        return "npm.cmd"
    return "npm"


def default_ui_src_dir(ui_dir: Path) -> Path:
    return ui_dir / "src"


def default_node_modules_dir(ui_dir: Path) -> Path:
    return ui_dir / "node_modules"


def default_ui_dist_dir(ui_dir: Path) -> Path:
    return ui_dir / "client" / "dist"


def lock_file_for(static_dir: Path) -> Path:
    """Lock shared by every build that stages into static_dir."""
    return static_dir.absolute().parent / LOCK_FILE_NAME


def is_empty_dir(path: Path) -> bool:
    """True if path does not exist or exists as a directory with no entries."""
    if not path.exists():
        return True
    return next(path.iterdir(), None) is None
