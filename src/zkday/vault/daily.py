"""Daily notes — path layout, template, and create-if-missing."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DAILY_NOTES_SUBPATH = Path("periodic-notes") / "daily-notes"

DAILY_TEMPLATE = """\
# {today}

[[{yesterday}]] - [[{tomorrow}]]

## Tracker
  - [ ] 

## Log

"""


def render_daily_note(today: str, yesterday: str, tomorrow: str) -> str:
    return DAILY_TEMPLATE.format(today=today, yesterday=yesterday, tomorrow=tomorrow)


def daily_note_path(base_dir: Path, today: str) -> Path:
    """Path of the daily note for ``today`` under the notes root.

    Neither ``base_dir`` nor the daily-notes folder is checked for existence;
    a missing folder surfaces later as an I/O error on creation.
    """
    return base_dir / DAILY_NOTES_SUBPATH / f"{today}.md"


def create_note_if_missing(path: Path, today: str, yesterday: str, tomorrow: str) -> bool:
    """Write the daily template to ``path`` unless the file already exists.

    Returns True if the note was created on this call. An existing file is
    never read or modified, including one created by a concurrent run
    between the existence check and the write. Any other OSError (missing
    parent folder, permissions, disk full) propagates to the caller.
    """
    if path.exists():
        logger.debug("Daily note already exists: %s", path)
        return False

    logger.info("File does not exist, creating new daily note: %s", path)
    content = render_daily_note(today, yesterday, tomorrow)
    try:
        f = open(path, "x", encoding="utf-8")
    except FileExistsError:
        # Another run created it after the existence check; leave it alone
        logger.debug("Daily note appeared concurrently: %s", path)
        return False
    with f:
        f.write(content)
    return True
