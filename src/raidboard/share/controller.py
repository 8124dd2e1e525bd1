"""Share action and the transient "copied" state.

A successful write flips copied to True and schedules a revert after
revert_delay seconds. The revert is a single asyncio timer handle per
controller: a newer successful share cancels and replaces it, and
dispose() cancels it for good.
"""

from __future__ import annotations

import asyncio
import logging

from raidboard.share.clipboard import ClipboardBase, ClipboardError

logger = logging.getLogger(__name__)

COPIED_REVERT_SECONDS = 2.0


class ShareController:
    """Writes share text to a clipboard and tracks the copied indicator."""

    def __init__(self, clipboard: ClipboardBase, revert_delay: float = COPIED_REVERT_SECONDS):
        """Initialize controller.

        Args:
            clipboard: Clipboard collaborator.
            revert_delay: Seconds before copied reverts to False.
        """
        self.clipboard = clipboard
        self.revert_delay = revert_delay
        self.copied = False
        self._revert_handle: asyncio.TimerHandle | None = None
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    async def share(self, text: str) -> bool:
        """Copy text to the clipboard.

        Overlapping calls each issue their own independent write. Clipboard
        failures are logged and reported through the return value, never
        raised.

        Args:
            text: Share text.

        Returns:
            True if the text was copied.
        """
        if self._disposed:
            return False

        try:
            await self.clipboard.write(text)
        except ClipboardError as e:
            logger.warning(f"Failed to copy share text: {e}")
            if not self._disposed:
                self._cancel_revert()
                self.copied = False
            return False

        # Card may have been torn down while the write was pending
        if self._disposed:
            return False

        self.copied = True
        self._schedule_revert()
        logger.info("Share text copied to clipboard")
        return True

    def dispose(self) -> None:
        """Cancel any pending revert and stop accepting shares."""
        self._cancel_revert()
        self._disposed = True

    def _schedule_revert(self) -> None:
        self._cancel_revert()
        loop = asyncio.get_running_loop()
        self._revert_handle = loop.call_later(self.revert_delay, self._revert)

    def _cancel_revert(self) -> None:
        if self._revert_handle is not None:
            self._revert_handle.cancel()
            self._revert_handle = None

    def _revert(self) -> None:
        self._revert_handle = None
        self.copied = False
