from pathlib import Path

from frontend_embed.config import BuildConfig
from frontend_embed.types import (
    ProcessFailedError,
    ProcessLaunchError,
    StepOutcome,
    UiBuildError,
)


class FrontendEmbedder:
    """Forwarding class over the build pipeline for programmatic use."""

    def __init__(self, config: BuildConfig | None = None) -> None:
        if config is None:
            from frontend_embed.config import resolve_config

            config = resolve_config()
        self.config = config

    def install_deps(self, force: bool = False) -> StepOutcome:
        from frontend_embed.npm import install_ui_deps

        return install_ui_deps(self.config, force=force)

    def build(self, force: bool = False) -> StepOutcome:
        from frontend_embed.npm import build_ui

        return build_ui(self.config, force=force)

    def stage(self) -> None:
        from frontend_embed.copy_dir import copy_dir_all

        copy_dir_all(self.config.ui_dist_dir, self.config.static_dir)

    def generate_resources(self, out_dir: Path | None = None) -> list:
        """Write generated.py and files.json for the staged directory.

        Returns:
            List of ResourceEntry, one per staged file
        """
        from frontend_embed.resource_dir import resource_dir

        return resource_dir(self.config.static_dir).build(
            out_dir or self.config.out_dir
        )

    def run(self, force_install: bool = False, force_build: bool = False):
        from frontend_embed.build import build_frontend

        return build_frontend(
            self.config, force_install=force_install, force_build=force_build
        )


__all__ = [
    "BuildConfig",
    "FrontendEmbedder",
    "ProcessFailedError",
    "ProcessLaunchError",
    "StepOutcome",
    "UiBuildError",
]
