"""The day command pipeline: resolve dates, ensure the note, open the editor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from zkday.dates import DailyDates
from zkday.editor import SubprocessEditorLauncher, parse_editor_command
from zkday.vault.daily import create_note_if_missing, daily_note_path

if TYPE_CHECKING:
    from datetime import date
    from pathlib import Path

    from zkday.config import Settings
    from zkday.editor import EditorLauncher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayResult:
    """Outcome of a single run."""

    path: Path
    dates: DailyDates
    created: bool


def run_day_command(
    settings: Settings,
    launcher: EditorLauncher | None = None,
    *,
    today: date | None = None,
) -> DayResult:
    """Create today's note if needed and open it in the configured editor.

    The first OSError aborts the run and propagates. An unparseable editor
    command fails before the note is written; the editor is not launched if
    note creation fails.
    """
    launcher = launcher or SubprocessEditorLauncher()
    parse_editor_command(settings.editor_command)
    dates = DailyDates.for_day(today)
    path = daily_note_path(settings.base_dir, dates.today)

    created = create_note_if_missing(path, dates.today, dates.yesterday, dates.tomorrow)
    launcher.launch(settings.editor_command, path, cwd=settings.base_dir)

    logger.debug("Day command finished for %s", dates.today)
    return DayResult(path=path, dates=dates, created=created)
