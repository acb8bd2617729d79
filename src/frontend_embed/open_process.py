import subprocess
import time
from pathlib import Path

from frontend_embed.print_banner import banner
from frontend_embed.types import ProcessLaunchError


def open_process(
    cmd_list: list[str],
    cwd: Path,
    env: dict | None = None,
) -> subprocess.Popen:
    print(banner("Running command:\n  " + subprocess.list2cmdline(cmd_list)))

    try:
        out = subprocess.Popen(
            cmd_list,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            # Child output is only echoed, undecodable bytes must not fail the build
            encoding="utf-8",
            errors="replace",
            bufsize=1,  # Line buffered on Python side
            env=env,
        )
    except OSError as e:
        raise ProcessLaunchError(
            f"Could not start {cmd_list[0]!r} in {cwd}: {e}"
        ) from e
    return out


def elapsed_prefix(start: float, line: str) -> str:
    """Prefix a line with the seconds elapsed since start (a monotonic time)."""
    return f"{time.monotonic() - start:3.2f} {line.rstrip()}"


def run_process(cmd_list: list[str], cwd: Path, env: dict | None = None) -> int:
    """
    Run a command to completion, echoing its output with the seconds elapsed
    since the step started.

    There is no timeout: a hung child hangs the caller.

    Returns:
        The process exit code.

    Raises:
        ProcessLaunchError: If the executable could not be started.
    """
    start = time.monotonic()
    proc = open_process(cmd_list, cwd, env)
    assert proc.stdout is not None
    try:
        for line in proc.stdout:
            print(elapsed_prefix(start, line))
    finally:
        proc.stdout.close()
        returncode = proc.wait()
    return returncode
