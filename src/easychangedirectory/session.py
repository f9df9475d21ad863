"""What a navigation session hands back to the shell."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class Action(Enum):
    """How the session ended."""

    CHANGE = "change"  # confirmed: cd to the path
    KEEP = "keep"  # cancelled: stay where the shell was
    PRINT = "print"  # print the path instead of changing to it


@dataclass(frozen=True)
class SessionResult:
    """Final action and the path it applies to."""

    action: Action
    path: Path


def write_temp_path(result: SessionResult, temp_path: Path) -> bool:
    """Write the path a shell wrapper should cd into.

    Only a confirmed change is written; the wrapper leaves the shell where it
    is when the file stays empty.
    """
    if result.action is not Action.CHANGE:
        return False

    temp_path.write_text(str(result.path), encoding="utf-8")
    logger.info("Wrote %s for %s to %s", result.path, result.action.value, temp_path)
    return True
