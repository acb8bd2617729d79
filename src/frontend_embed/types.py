import subprocess
from dataclasses import dataclass


class UiBuildError(RuntimeError):
    """Any failure that must stop the frontend build."""


class ProcessLaunchError(UiBuildError):
    """The package manager executable could not be started."""


class ProcessFailedError(UiBuildError):
    def __init__(self, cmd: list[str], returncode: int) -> None:
        self.cmd = cmd
        self.returncode = returncode
        super().__init__(
            f"Command {subprocess.list2cmdline(cmd)!r} failed with exit code {returncode}"
        )


@dataclass
class StepOutcome:
    """Result of a conditional build step."""

    ran: bool
    returncode: int = 0

    @staticmethod
    def skipped() -> "StepOutcome":
        return StepOutcome(ran=False, returncode=0)
