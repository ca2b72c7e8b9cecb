# spendwise/services/lifecycle.py
"""
Archive / restore state machine shared by every owned record.

    Active   --archive--> Archived
    Archived --restore--> Active
    Active | Archived --delete--> (removed, see RecordStore.delete)

Archive on an archived record and restore on an active one are no-ops:
the record comes back untouched, updated_at included.
"""

from __future__ import annotations

from enum import Enum

from spendwise.models import OwnedRecord, utcnow


class RecordState(str, Enum):
    active = "active"
    archived = "archived"


class LifecycleAction(str, Enum):
    archive = "archive"
    restore = "restore"


_TARGET = {
    LifecycleAction.archive: RecordState.archived,
    LifecycleAction.restore: RecordState.active,
}


def state_of(record: OwnedRecord) -> RecordState:
    return RecordState.archived if record.is_deleted else RecordState.active


def apply_transition(record: OwnedRecord, action: LifecycleAction) -> bool:
    """
    Move the record to the action's target state.
    Returns False (and changes nothing) when it is already there.
    Only is_deleted and updated_at are touched.
    """
    target = _TARGET[action]
    if state_of(record) is target:
        return False
    record.is_deleted = target is RecordState.archived
    record.updated_at = utcnow()
    return True
