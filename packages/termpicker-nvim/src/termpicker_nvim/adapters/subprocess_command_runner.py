"""Subprocess-based implementation of the CommandRunnerPort."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from termpicker_nvim.adapters.ports import CommandRunnerPort
from termpicker_nvim.domain.binary import CommandResult

logger = logging.getLogger(__name__)

# Exit status reported when the program itself cannot be started
COMMAND_NOT_RUNNABLE = 127


class SubprocessCommandRunner:
    """Adapter that runs external commands with the subprocess module.

    Commands run synchronously with stderr folded into stdout so callers
    get a single diagnostic text. No shell is involved; arguments are
    passed as a vector.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run a command to completion.

        Args:
            args: Argument vector; args[0] is the program.

        Returns:
            CommandResult with exit status and combined output. A program
            that cannot be started yields status 127 and the OS error text.
        """
        argv = list(args)
        logger.debug("Running command: %s", argv)
        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug("Command %s could not be started: %s", argv[0], e)
            return CommandResult(returncode=COMMAND_NOT_RUNNABLE, output=str(e))

        logger.debug("Command %s exited with %d", argv[0], completed.returncode)
        return CommandResult(
            returncode=completed.returncode,
            output=completed.stdout or "",
        )

    def which(self, name: str) -> Path | None:
        """Locate a program on PATH.

        Args:
            name: Program name.

        Returns:
            Path to the program, or None if not found.
        """
        found = shutil.which(name)
        return Path(found) if found else None


# Runtime protocol check
assert isinstance(SubprocessCommandRunner(), CommandRunnerPort)
