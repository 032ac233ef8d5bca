"""Output sinks: the default web browser and the system clipboard."""

import shutil
import subprocess
import sys
import webbrowser

import structlog

from gopen.core.exceptions import BrowserError, ClipboardError

logger = structlog.get_logger(__name__)

# Linux clipboard tools, tried in order (Wayland first)
LINUX_CLIPBOARD_COMMANDS: list[list[str]] = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def open_browser(url: str) -> None:
    """Open a URL in the default web browser.

    Raises:
        BrowserError: If no browser could be launched
    """
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise BrowserError(f"Could not open browser: {e}", details={"url": url}) from e
    if not opened:
        raise BrowserError("No web browser available", details={"url": url})


def clipboard_command(platform: str | None = None) -> list[str]:
    """Return the command that reads stdin into the clipboard on this platform.

    Raises:
        ClipboardError: If the platform is unsupported or no tool is installed
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return ["pbcopy"]
    if platform.startswith("linux"):
        for command in LINUX_CLIPBOARD_COMMANDS:
            if shutil.which(command[0]):
                return command
        raise ClipboardError(
            "No clipboard utility found (install wl-copy, xclip, or xsel)",
            details={"platform": platform},
        )
    if platform in ("win32", "cygwin"):
        return ["clip"]
    raise ClipboardError(f"Unsupported platform: {platform}", details={"platform": platform})


def copy_to_clipboard(text: str) -> None:
    """Copy text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard tool is available or it fails
    """
    command = clipboard_command()
    try:
        subprocess.run(command, input=text, text=True, capture_output=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning("Clipboard command failed", command=command, error=str(e))
        raise ClipboardError(
            f"Failed to copy to clipboard: {e}",
            details={"command": command},
        ) from e
