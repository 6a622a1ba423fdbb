from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveGrant


class LeaveRepository(Protocol):
    def list_leaves(self, *, year: int, status: Optional[LeaveStatus] = None) -> Sequence[LeaveGrant]:
        raise NotImplementedError
