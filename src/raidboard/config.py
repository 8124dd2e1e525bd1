"""Runtime settings from environment variables.

RAIDBOARD_CLIPBOARD              memory | command (default memory)
RAIDBOARD_CLIPBOARD_COMMAND      command line for the command clipboard
RAIDBOARD_COPIED_REVERT_SECONDS  copied indicator duration (default 2.0)
RAIDBOARD_CORS_ORIGINS           comma-separated allowed origins
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from raidboard.share.clipboard import ClipboardBase, CommandClipboard, MemoryClipboard
from raidboard.share.controller import COPIED_REVERT_SECONDS

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",  # Next.js dev server
    "http://127.0.0.1:3000",
)

ClipboardKind = Literal["memory", "command"]


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    clipboard: ClipboardKind = "memory"
    clipboard_command: str | None = None
    copied_revert_seconds: float = COPIED_REVERT_SECONDS
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings instance.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    clipboard = env.get("RAIDBOARD_CLIPBOARD", "memory").strip().lower()
    if clipboard not in ("memory", "command"):
        raise ValueError(f"Unknown RAIDBOARD_CLIPBOARD: {clipboard}")

    revert_raw = env.get("RAIDBOARD_COPIED_REVERT_SECONDS")
    revert = float(revert_raw) if revert_raw else COPIED_REVERT_SECONDS
    if revert < 0:
        raise ValueError(f"RAIDBOARD_COPIED_REVERT_SECONDS must be >= 0, got {revert}")

    origins_raw = env.get("RAIDBOARD_CORS_ORIGINS")
    if origins_raw:
        origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())
    else:
        origins = DEFAULT_CORS_ORIGINS

    return Settings(
        clipboard=clipboard,  # type: ignore[arg-type]
        clipboard_command=env.get("RAIDBOARD_CLIPBOARD_COMMAND", "").strip() or None,
        copied_revert_seconds=revert,
        cors_origins=origins,
    )


def build_clipboard(settings: Settings) -> ClipboardBase:
    """Clipboard collaborator for the configured kind."""
    if settings.clipboard == "command":
        return CommandClipboard(settings.clipboard_command)
    return MemoryClipboard()
