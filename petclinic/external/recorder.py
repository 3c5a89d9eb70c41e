"""Record/replay tool driven through operator-configured commands.

The recording tool runs outside the Python process. Operators point the
``RECORDER_*_COMMAND`` settings at whatever command lines attach to, save
and detach from this process; ``{pid}`` and ``{filename}`` placeholders are
substituted inside each argument after the command line is split, so a
substituted value always stays a single argument.
"""

import asyncio
import os
import shlex

from petclinic.external.interfaces import IRecorder
from petclinic.infrastructure.logging.config import get_logger


logger = get_logger(__name__)


class RecorderError(Exception):
    """Raised when a recorder command is missing or fails."""


class CommandRecorder(IRecorder):
    """Runs one subprocess per recorder operation."""

    def __init__(
        self,
        start_command: str | None = None,
        save_command: str | None = None,
        stop_command: str | None = None,
    ) -> None:
        self._start_command = start_command
        self._save_command = save_command
        self._stop_command = stop_command

    async def start(self) -> None:
        await self._run("start", self._start_command)

    async def save(self, filename: str) -> None:
        await self._run("save", self._save_command, filename=filename)

    async def stop(self) -> None:
        await self._run("stop", self._stop_command)

    async def _run(self, operation: str, template: str | None, filename: str = "") -> None:
        """Format and execute a command template.

        Raises:
            RecorderError: If no command is configured or it exits non-zero
        """
        if not template:
            raise RecorderError(f"No recorder command configured for '{operation}'")

        argv = [
            token.format(pid=os.getpid(), filename=filename) for token in shlex.split(template)
        ]
        logger.debug("recorder_command", operation=operation, argv=argv)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise RecorderError(f"Recorder command for '{operation}' could not start: {e}") from e

        _, stderr = await process.communicate()
        if process.returncode != 0:
            raise RecorderError(
                f"Recorder command for '{operation}' exited with {process.returncode}: "
                f"{stderr.decode(errors='replace').strip()}"
            )
