"""Subprocess-based implementation of the PickerLauncherPort."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from termpicker_nvim.domain.exceptions import ProcessFailureError

logger = logging.getLogger(__name__)


class SubprocessPickerLauncher:
    """Adapter that runs termpicker attached to the current terminal.

    termpicker draws its interface on stderr and prints the chosen color
    on stdout, so stdin and stderr are inherited and only stdout is
    captured. The exit status is not inspected: a cancelled pick simply
    prints nothing.
    """

    def launch(self, args: Sequence[str]) -> list[str]:
        """Run the picker and return its stdout lines.

        Args:
            args: Picker argument vector; args[0] is the binary path.

        Returns:
            Lines printed on stdout, in order.

        Raises:
            ProcessFailureError: If the picker binary cannot be started.
        """
        argv = list(args)
        logger.debug("Launching picker: %s", argv)
        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ProcessFailureError(argv, returncode=127, output=str(e)) from e

        return (completed.stdout or "").splitlines()
