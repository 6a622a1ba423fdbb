from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_employees(self) -> Sequence[Employee]:
        """All employee profiles ordered by display name."""

        raise NotImplementedError
