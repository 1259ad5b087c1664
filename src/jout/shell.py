"""Run external commands and capture their combined output."""

import subprocess
import threading
from dataclasses import dataclass
from typing import Optional, Sequence

from .exceptions import ProcessError
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured output (stdout and stderr interleaved) and exit code."""

    output: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def run_command(command_line: Sequence[str], timeout: Optional[float] = None) -> CommandResult:
    """Run a command to completion with stderr merged into stdout.

    Output is read line by line and every line is terminated with a single
    "\\n", whatever line ending the child used.

    Args:
        command_line: Executable followed by its arguments
        timeout: Kill the child after this many seconds (None = no limit)

    Raises:
        ProcessError: If the process cannot be spawned, its output cannot be
            read, or the timeout elapses
    """
    logger.debug("Running %s (%d arguments)", command_line[0], len(command_line) - 1)

    try:
        proc = subprocess.Popen(
            list(command_line),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise ProcessError(command_line, f"cannot spawn process: {e}")

    timed_out = threading.Event()
    timer = None
    if timeout is not None:

        def _kill() -> None:
            timed_out.set()
            proc.kill()

        timer = threading.Timer(timeout, _kill)
        timer.daemon = True
        timer.start()

    chunks = []
    try:
        stdout = proc.stdout
        if stdout is None:
            raise ProcessError(command_line, "no output stream")
        for line in stdout:
            chunks.append(line.rstrip("\r\n"))
            chunks.append("\n")
        exit_code = proc.wait()
    except OSError as e:
        proc.kill()
        proc.wait()
        raise ProcessError(command_line, f"cannot read output: {e}")
    finally:
        if timer is not None:
            timer.cancel()
        if proc.stdout:
            proc.stdout.close()

    output = "".join(chunks)
    if timed_out.is_set():
        raise ProcessError(command_line, f"timed out after {timeout}s", output=output)

    logger.debug("%s exited with %d", command_line[0], exit_code)
    return CommandResult(output=output, exit_code=exit_code)
