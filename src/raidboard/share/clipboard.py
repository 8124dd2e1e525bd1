"""Clipboard collaborators.

Clipboards implement a narrow interface: write(text), raising
ClipboardError on failure. They must NOT format text or track the
copied state - that belongs to the share controller.
"""

from __future__ import annotations

import asyncio
import shlex
import sys
from abc import ABC, abstractmethod


class ClipboardError(RuntimeError):
    """Clipboard write failed."""


class ClipboardBase(ABC):
    """Abstract base class for clipboard services."""

    @abstractmethod
    async def write(self, text: str) -> None:
        """Write text to the clipboard.

        Args:
            text: Text to copy.

        Raises:
            ClipboardError: If the write failed.
        """
        pass


class MemoryClipboard(ClipboardBase):
    """In-process clipboard for tests and headless servers.

    Keeps every written text; can be told to fail to exercise the
    not-copied path.
    """

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.history: list[str] = []

    @property
    def text(self) -> str | None:
        """Last successfully written text."""
        return self.history[-1] if self.history else None

    async def write(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("Clipboard unavailable")
        self.history.append(text)


def default_clipboard_command() -> list[str]:
    """System clipboard command for the current platform."""
    if sys.platform == "darwin":
        return ["pbcopy"]
    if sys.platform.startswith("win"):
        return ["clip"]
    return ["xclip", "-selection", "clipboard"]


class CommandClipboard(ClipboardBase):
    """Clipboard backed by a system command reading stdin."""

    def __init__(self, command: list[str] | str | None = None, timeout: float = 5.0):
        """Initialize command clipboard.

        Args:
            command: Command line (list or shell-style string). Defaults to
                the platform clipboard command.
            timeout: Seconds to wait for the command.
        """
        if command is None:
            command = default_clipboard_command()
        elif isinstance(command, str):
            command = shlex.split(command)
        if not command:
            raise ValueError("Clipboard command must not be empty")
        self.command = list(command)
        self.timeout = timeout

    async def write(self, text: str) -> None:
        try:
            process = await asyncio.create_subprocess_exec(
                *self.command,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ClipboardError(f"Clipboard command not found: {self.command[0]}") from e
        except OSError as e:
            raise ClipboardError(f"Clipboard command failed to start: {e}") from e

        try:
            _, stderr = await asyncio.wait_for(
                process.communicate(text.encode("utf-8")),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise ClipboardError(f"Clipboard command timed out after {self.timeout}s") from e

        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip() if stderr else ""
            raise ClipboardError(
                f"Clipboard command exited with {process.returncode}: {detail}"
            )
