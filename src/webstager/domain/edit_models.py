from __future__ import annotations

"""
Edit Result Models.

Defines the outcome object returned by every forest operation. Invalid
requests are absorbed as no-ops; the status tells callers which kind of
no-op happened without ever raising.
"""

from dataclasses import dataclass
from enum import Enum

from webstager.domain.tree_models import Forest


class EditStatus(str, Enum):
    """Outcome classification for a single forest edit."""
    APPLIED = "applied"
    EMPTY_NAME = "empty_name"
    INVALID_KIND = "invalid_kind"
    EMPTY_BATCH = "empty_batch"
    TARGET_NOT_FOUND = "target_not_found"
    NODE_NOT_FOUND = "node_not_found"


@dataclass(frozen=True)
class EditResult:
    """
    Forest produced by an edit together with its status.

    Attributes:
        forest: The new forest, or the untouched input forest on a no-op.
        status: Classification of the outcome.
    """
    forest: Forest
    status: EditStatus

    @property
    def changed(self) -> bool:
        return self.status is EditStatus.APPLIED


# -----------------------------------------------------------------------------
# FACTORY HELPERS
# -----------------------------------------------------------------------------

def applied(forest: Forest) -> EditResult:
    """Build the result of an edit that produced a new forest."""
    return EditResult(forest=forest, status=EditStatus.APPLIED)


def rejected(forest: Forest, status: EditStatus) -> EditResult:
    """
    Build the result of an absorbed edit.

    Args:
        forest: The input forest, returned unchanged.
        status: Reason the edit was absorbed.

    Returns:
        EditResult: Result carrying the original forest.
    """
    if status is EditStatus.APPLIED:
        raise ValueError("rejected() requires a non-applied status.")
    return EditResult(forest=forest, status=status)
