"""mkvtoolnix wrappers.

mkvmerge prints container metadata as JSON; mkvpropedit rewrites the
container title tag in place.
"""

from __future__ import annotations

import logging
import random
import shutil
import string
import subprocess

from mkvrelease.errors import ToolError

logger = logging.getLogger(__name__)

IDENTIFY_TIMEOUT = 60
EDIT_TIMEOUT = 120

# Length of the random tag appended to container titles
TAG_LENGTH = 7


def is_available() -> bool:
    """Check if mkvmerge and mkvpropedit are both on PATH."""
    return shutil.which("mkvmerge") is not None and shutil.which("mkvpropedit") is not None


def _run(cmd: list[str], timeout: int, action: str) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as e:
        raise ToolError(f"{cmd[0]} is needed to {action}") from e
    except subprocess.TimeoutExpired as e:
        raise ToolError(f"{cmd[0]} timed out after {timeout} seconds while trying to {action}") from e


def identify(path: str) -> str:
    """Return the identification JSON of a container.

    Raises:
        ToolError: If mkvmerge is missing or cannot read the file
    """
    action = f"get file information for '{path}'"
    result = _run(["mkvmerge", "-J", path], IDENTIFY_TIMEOUT, action)
    # mkvmerge exits with 1 on warnings, which still yields usable JSON
    if result.returncode > 1 or not result.stdout:
        error_msg = result.stderr.strip() or result.stdout.strip() or f"exit code {result.returncode}"
        raise ToolError(f"Cannot {action}: {error_msg}")
    return result.stdout


def random_tag(length: int = TAG_LENGTH) -> str:
    """Return a random alphanumeric tag."""
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def set_title(path: str, title: str, tag_suffix: bool = True) -> str:
    """Set the container title.

    Args:
        path: Path to the container
        title: New title
        tag_suffix: Append " - <random tag>" so each upload has a distinct title

    Returns:
        The title written to the container

    Raises:
        ToolError: If mkvpropedit is missing or fails
    """
    full_title = f"{title} - {random_tag()}" if tag_suffix else title
    action = f"update the title of '{path}'"
    result = _run(
        ["mkvpropedit", path, "--edit", "info", "--set", f"title={full_title}"],
        EDIT_TIMEOUT,
        action,
    )
    if result.returncode != 0:
        error_msg = result.stderr.strip() or result.stdout.strip() or f"exit code {result.returncode}"
        raise ToolError(f"Unable to {action}: {error_msg}")

    logger.debug("Set title of '%s' to '%s'", path, full_title)
    return full_title
