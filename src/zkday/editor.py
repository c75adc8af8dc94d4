"""Editor launching — hand the daily note to an interactive editor."""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class EditorCommandError(OSError):
    """Raised when the editor command cannot be split into arguments."""

    def __init__(self, editor: str, reason: str) -> None:
        self.editor = editor
        super().__init__(f"Cannot parse EDITOR {editor!r}: {reason}")


def parse_editor_command(editor: str) -> list[str]:
    """Split an editor command such as ``code --wait`` into argv.

    Raises EditorCommandError on unbalanced quoting or an empty command.
    """
    try:
        argv = shlex.split(editor)
    except ValueError as exc:
        raise EditorCommandError(editor, str(exc)) from exc
    if not argv:
        raise EditorCommandError(editor, "empty command")
    return argv


class EditorLauncher(Protocol):
    """Opens ``path`` in ``editor`` and returns once the editor has exited."""

    def launch(self, editor: str, path: Path, *, cwd: Path) -> None: ...


class SubprocessEditorLauncher:
    """Runs the editor as a blocking child process.

    The child starts in ``cwd``; the parent's working directory is left alone.
    The editor's exit status is logged but not treated as a failure. Failing
    to spawn (unknown executable, permissions, missing cwd) raises OSError.
    """

    def launch(self, editor: str, path: Path, *, cwd: Path) -> None:
        argv = [*parse_editor_command(editor), str(path)]
        logger.debug("Launching editor: %s (cwd=%s)", argv, cwd)
        completed = subprocess.run(argv, cwd=cwd, check=False)
        logger.debug("Editor exited with status %d", completed.returncode)
