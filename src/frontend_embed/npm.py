"""Conditional npm steps: dependency install and frontend build."""

from frontend_embed.config import BuildConfig
from frontend_embed.open_process import run_process
from frontend_embed.paths import is_empty_dir
from frontend_embed.types import ProcessFailedError, StepOutcome


def _run_npm(config: BuildConfig, npm_args: list[str]) -> StepOutcome:
    cmd = [config.npm_cmd] + npm_args
    returncode = run_process(cmd, cwd=config.ui_dir)
    if returncode != 0:
        raise ProcessFailedError(cmd, returncode)
    return StepOutcome(ran=True, returncode=returncode)


def install_ui_deps(config: BuildConfig, force: bool = False) -> StepOutcome:
    """Install frontend dependencies unless node_modules is already there.

    Install-time scripts are disabled. An existing node_modules is trusted
    as a complete install; pass force=True to reinstall anyway.

    Raises:
        ProcessLaunchError: If npm could not be started.
        ProcessFailedError: If npm exited non-zero.
    """
    if config.node_modules_dir.exists() and not force:
        return StepOutcome.skipped()
    print("Installing node dependencies...")
    return _run_npm(config, ["clean-install", "--ignore-scripts"])


def build_ui(config: BuildConfig, force: bool = False) -> StepOutcome:
    """Run the frontend build unless the staging directory already has content.

    A staging directory that exists but is empty (e.g. left behind by an
    interrupted run) counts as not built.

    Raises:
        ProcessLaunchError: If npm could not be started.
        ProcessFailedError: If npm exited non-zero.
    """
    if not is_empty_dir(config.static_dir) and not force:
        return StepOutcome.skipped()
    print("Building UI...")
    return _run_npm(config, ["run", "build"])
