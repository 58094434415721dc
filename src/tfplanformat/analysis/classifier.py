"""Map Terraform action vectors to a single change kind."""

from enum import Enum
from typing import Dict, Optional, Sequence, Tuple
from ..ingest.models import PrimitiveAction
from ..utils.errors import UnknownActionCombinationError


class ChangeKind(str, Enum):
    """Semantic change kind of one resource."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    REPLACE = "replace"
    NO_OP = "no-op"

    @property
    def icon(self) -> str:
        """Fixed display icon."""
        return _ICONS[self]

    @property
    def priority(self) -> int:
        """Fixed tie-break priority; lower sorts first."""
        return _PRIORITIES[self]


_ICONS: Dict[ChangeKind, str] = {
    ChangeKind.CREATE: "✅",
    ChangeKind.UPDATE: "\U0001f504",
    ChangeKind.DELETE: "❌",
    ChangeKind.REPLACE: "♻️",
    ChangeKind.NO_OP: "\U0001f937",
}

_PRIORITIES: Dict[ChangeKind, int] = {
    ChangeKind.DELETE: 0,
    ChangeKind.REPLACE: 1,
    ChangeKind.UPDATE: 2,
    ChangeKind.CREATE: 3,
    ChangeKind.NO_OP: 4,
}

_CREATE = PrimitiveAction.CREATE.value
_UPDATE = PrimitiveAction.UPDATE.value
_DELETE = PrimitiveAction.DELETE.value
_NO_OP = PrimitiveAction.NO_OP.value

# Compared as ordered tuples; no inference beyond this table.
_ACTION_TABLE: Dict[Tuple[str, ...], ChangeKind] = {
    (): ChangeKind.NO_OP,
    (_NO_OP,): ChangeKind.NO_OP,
    (_CREATE,): ChangeKind.CREATE,
    (_UPDATE,): ChangeKind.UPDATE,
    (_DELETE,): ChangeKind.DELETE,
    (_DELETE, _CREATE): ChangeKind.REPLACE,
    (_CREATE, _DELETE): ChangeKind.REPLACE,
}


def classify(actions: Sequence[str], address: Optional[str] = None) -> ChangeKind:
    """
    Classify a Terraform action list.
    
    Args:
        actions: Ordered primitive actions from change.actions
        address: Resource address, for error context
        
    Returns:
        ChangeKind for the action tuple
        
    Raises:
        UnknownActionCombinationError: If the tuple is not in the table
    """
    kind = _ACTION_TABLE.get(tuple(actions))
    if kind is None:
        raise UnknownActionCombinationError(list(actions), address=address)
    return kind


def sort_key(kind: ChangeKind) -> Tuple[int, str]:
    """Stable sort key for grouping resources by change kind."""
    return (kind.priority, kind.value)
