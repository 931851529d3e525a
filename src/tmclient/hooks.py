"""Before/after command hooks.

The project config can attach shell commands to a client command::

    <hooks>
      <hook command="pull">
        <before>git stash</before>
        <after>make messages</after>
      </hook>
    </hooks>

Commands are split with shlex and run without a shell, in declaration order.

Python 3.13+.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import TYPE_CHECKING

from tmclient.diagnostics import ErrorTemplate, HookError
from tmclient.enums import HookPhase

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from tmclient.config.model import CommandHook

__all__ = ["run_hooks"]

logger = logging.getLogger(__name__)


def run_hooks(
    hooks: Sequence[CommandHook],
    phase: HookPhase,
    runner: Callable[..., subprocess.CompletedProcess[bytes]] = subprocess.run,
) -> None:
    """Run every hook command for one phase.

    Args:
        hooks: Hooks attached to the current client command
        phase: Whether to run the ``before`` or ``after`` commands
        runner: Process runner, ``subprocess.run`` compatible

    Raises:
        HookError: On the first command with a non-zero exit status
    """
    for hook in hooks:
        commands = hook.before if phase is HookPhase.BEFORE else hook.after
        for command in commands:
            logger.info("[Running command]$ %s", command)
            result = runner(shlex.split(command), check=False)
            if result.returncode != 0:
                raise HookError(ErrorTemplate.hook_failed(command, result.returncode))
