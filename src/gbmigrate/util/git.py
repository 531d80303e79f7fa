"""Git worktree refresh for the GitBook source trees"""

import logging
import subprocess

from gbmigrate.config import Conversion


logger = logging.getLogger(__name__)


def _git(*args: str, check: bool) -> subprocess.CompletedProcess:
    logger.info("git %s", " ".join(args))
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=False)
    if check and result.returncode != 0:
        raise RuntimeError(f"git {' '.join(args)} failed: {result.stderr.strip()}")
    return result


def refresh_worktrees(conversions: list[Conversion]) -> list[str]:
    """Recreate the worktree of each conversion at its ref; returns refreshed paths.

    Removing a worktree that doesn't exist is fine; failing to add one raises RuntimeError.
    """
    refreshed = []
    for conv in conversions:
        if not conv.worktree or not conv.ref:
            continue
        _git("worktree", "remove", conv.worktree, check=False)
        _git("worktree", "add", conv.worktree, conv.ref, check=True)
        refreshed.append(conv.worktree)
    return refreshed
