"""Clipboard protocol."""

from typing import Protocol


class IClipboard(Protocol):
    """Host clipboard the share action copies into."""

    async def write_text(self, text: str) -> None:
        """Copy ``text``.

        Raises:
            ClipboardUnavailableError: if the host cannot write the clipboard.
        """
        ...
