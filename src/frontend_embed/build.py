"""
Frontend build pipeline.

Installs the frontend's dependencies, builds it, stages the output and
generates the embeddable resource manifest. Steps run strictly in order and
any failure stops the build.
"""

import time
from dataclasses import dataclass, field

import fasteners

from frontend_embed.config import BuildConfig
from frontend_embed.copy_dir import copy_dir_all
from frontend_embed.npm import build_ui, install_ui_deps
from frontend_embed.print_banner import banner
from frontend_embed.resource_dir import ResourceEntry, resource_dir
from frontend_embed.types import StepOutcome, UiBuildError


@dataclass
class BuildResult:
    install: StepOutcome
    build: StepOutcome
    resources: list[ResourceEntry] = field(default_factory=list)


def rerun_directive(config: BuildConfig) -> str:
    return f"{config.directive_prefix}rerun-if-changed={config.ui_src_dir}"


def stage_ui(
    config: BuildConfig, force_install: bool = False, force_build: bool = False
) -> tuple[StepOutcome, StepOutcome]:
    """Install, build and copy the frontend into the staging directory."""
    install = install_ui_deps(config, force=force_install)
    build = build_ui(config, force=force_build)
    copy_dir_all(config.ui_dist_dir, config.static_dir)
    return install, build


def build_frontend(
    config: BuildConfig,
    force_install: bool = False,
    force_build: bool = False,
    generate_resources: bool = True,
) -> BuildResult:
    """
    Run the whole pipeline under an inter-process lock on the staging area.

    Raises:
        UiBuildError: If installing, building or staging the UI failed. The
            underlying error is chained as __cause__.
        OSError: If the resource manifest could not be generated.
    """
    print(banner("Building frontend resources"))
    print(rerun_directive(config))

    config.lock_file.parent.mkdir(parents=True, exist_ok=True)
    with fasteners.InterProcessLock(str(config.lock_file)):
        start = time.time()
        try:
            install, build = stage_ui(config, force_install, force_build)
        except (UiBuildError, OSError) as e:
            print(banner(f"Error while building UI:\n{e}"))
            raise UiBuildError("Error while building UI") from e
        print(f"UI built successfully in {time.time() - start:.2f} seconds")

        result = BuildResult(install=install, build=build)
        if generate_resources:
            result.resources = resource_dir(config.static_dir).build(config.out_dir)
    return result
