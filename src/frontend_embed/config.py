"""
Build configuration for the frontend embedding step.

Every setting can come from a command line flag, an environment variable or
a built-in default, in that order of precedence. Paths derived from the
frontend root (source dir, node_modules, dist) follow the resolved root
unless they are set explicitly.
"""

import argparse
import os
from dataclasses import dataclass, field
from pathlib import Path

from frontend_embed.paths import (
    DEFAULT_DIRECTIVE_PREFIX,
    DEFAULT_OUT_DIR,
    DEFAULT_STATIC_DIR,
    DEFAULT_UI_DIR,
    default_node_modules_dir,
    default_npm_cmd,
    default_ui_dist_dir,
    default_ui_src_dir,
    lock_file_for,
)


@dataclass
class BuildConfig:
    """Resolved paths and tools for one build."""

    ui_dir: Path
    ui_src_dir: Path
    node_modules_dir: Path
    ui_dist_dir: Path
    static_dir: Path
    out_dir: Path
    npm_cmd: str = field(default_factory=default_npm_cmd)
    directive_prefix: str = DEFAULT_DIRECTIVE_PREFIX

    def __post_init__(self):
        assert isinstance(self.ui_dir, Path)
        assert isinstance(self.ui_src_dir, Path)
        assert isinstance(self.node_modules_dir, Path)
        assert isinstance(self.ui_dist_dir, Path)
        assert isinstance(self.static_dir, Path)
        assert isinstance(self.out_dir, Path)

    @property
    def lock_file(self) -> Path:
        return lock_file_for(self.static_dir)

    @staticmethod
    def for_ui_dir(ui_dir: Path, work_dir: Path | None = None) -> "BuildConfig":
        """Config using the standard layout under ui_dir, ignoring the environment."""
        work_dir = work_dir or Path(".")
        return BuildConfig(
            ui_dir=ui_dir,
            ui_src_dir=default_ui_src_dir(ui_dir),
            node_modules_dir=default_node_modules_dir(ui_dir),
            ui_dist_dir=default_ui_dist_dir(ui_dir),
            static_dir=work_dir / DEFAULT_STATIC_DIR,
            out_dir=work_dir / DEFAULT_OUT_DIR,
            npm_cmd=default_npm_cmd(),
        )


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add build configuration arguments to an argument parser."""
    group = parser.add_argument_group("Build Configuration")
    group.add_argument(
        "--ui-dir",
        type=Path,
        help=f"Frontend project root (ENV_UI_DIR, default: {DEFAULT_UI_DIR})",
    )
    group.add_argument(
        "--ui-src-dir",
        type=Path,
        help="Frontend source tree watched for changes (ENV_UI_SRC_DIR)",
    )
    group.add_argument(
        "--node-modules-dir",
        type=Path,
        help="Dependency marker directory (ENV_NODE_MODULES_DIR)",
    )
    group.add_argument(
        "--ui-dist-dir",
        type=Path,
        help="Frontend build output directory (ENV_UI_DIST_DIR)",
    )
    group.add_argument(
        "--static-dir",
        type=Path,
        help=f"Staging directory (ENV_STATIC_DIR, default: {DEFAULT_STATIC_DIR})",
    )
    group.add_argument(
        "--out-dir",
        type=Path,
        help=f"Resource manifest output directory (OUT_DIR, default: {DEFAULT_OUT_DIR})",
    )
    group.add_argument(
        "--npm",
        help="Package manager executable (ENV_NPM_CMD)",
    )
    group.add_argument(
        "--directive-prefix",
        help=f"Prefix for build system directives (ENV_DIRECTIVE_PREFIX, default: {DEFAULT_DIRECTIVE_PREFIX})",
    )


def resolve_config(args: argparse.Namespace | None = None) -> BuildConfig:
    """
    Resolve the build configuration from parsed arguments and the environment.

    Args:
        args: Parsed command line arguments, or None to use only the environment

    Returns:
        BuildConfig with every field filled in
    """

    def get_value(arg_name: str, env_name: str, default: str | Path) -> str:
        arg_value = getattr(args, arg_name, None) if args is not None else None
        if arg_value:
            return str(arg_value)
        env_value = os.environ.get(env_name)
        if env_value:
            return env_value
        return str(default)

    ui_dir = Path(get_value("ui_dir", "ENV_UI_DIR", DEFAULT_UI_DIR))
    return BuildConfig(
        ui_dir=ui_dir,
        ui_src_dir=Path(
            get_value("ui_src_dir", "ENV_UI_SRC_DIR", default_ui_src_dir(ui_dir))
        ),
        node_modules_dir=Path(
            get_value(
                "node_modules_dir",
                "ENV_NODE_MODULES_DIR",
                default_node_modules_dir(ui_dir),
            )
        ),
        ui_dist_dir=Path(
            get_value("ui_dist_dir", "ENV_UI_DIST_DIR", default_ui_dist_dir(ui_dir))
        ),
        static_dir=Path(get_value("static_dir", "ENV_STATIC_DIR", DEFAULT_STATIC_DIR)),
        out_dir=Path(get_value("out_dir", "OUT_DIR", DEFAULT_OUT_DIR)),
        npm_cmd=get_value("npm", "ENV_NPM_CMD", default_npm_cmd()),
        directive_prefix=get_value(
            "directive_prefix", "ENV_DIRECTIVE_PREFIX", DEFAULT_DIRECTIVE_PREFIX
        ),
    )
