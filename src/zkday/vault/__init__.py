"""Vault operations — locating and creating daily notes."""

from zkday.vault.daily import (
    DAILY_NOTES_SUBPATH,
    DAILY_TEMPLATE,
    create_note_if_missing,
    daily_note_path,
    render_daily_note,
)

__all__ = [
    "DAILY_NOTES_SUBPATH",
    "DAILY_TEMPLATE",
    "create_note_if_missing",
    "daily_note_path",
    "render_daily_note",
]
