from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..core.enums import AdjustmentKind, EventKind
from ..policy.resolver import PolicyContext
from .model import Adjustment, AttendanceEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EffectiveClock:
    first_in: Optional[datetime]
    last_out: Optional[datetime]


def usable_timestamp(event: AttendanceEvent) -> Optional[datetime]:
    ts = event.timestamp
    return ts if isinstance(ts, datetime) else None


def group_events_by_day(
    events: Iterable[AttendanceEvent], ctx: PolicyContext
) -> dict[date, list[AttendanceEvent]]:
    """Bucket events by local calendar day; events without a usable timestamp are dropped."""

    by_day: dict[date, list[AttendanceEvent]] = defaultdict(list)
    for event in events:
        ts = usable_timestamp(event)
        if ts is None:
            continue
        by_day[ctx.local_day(ts)].append(event)
    return by_day


def effective_clock(
    events: Sequence[AttendanceEvent],
    adjustment: Optional[Adjustment],
    ctx: PolicyContext,
) -> EffectiveClock:
    """Earliest IN and latest OUT of the day, with ADD_RECORD overrides applied per side.

    Re-scans collapse: IN,OUT,IN,OUT spans the first IN to the last OUT.
    """

    ins: list[datetime] = []
    outs: list[datetime] = []
    for event in events:
        ts = usable_timestamp(event)
        if ts is None:
            continue
        if event.kind == EventKind.IN:
            ins.append(ctx.local_time(ts))
        elif event.kind == EventKind.OUT:
            outs.append(ctx.local_time(ts))

    first_in = min(ins) if ins else None
    last_out = max(outs) if outs else None

    if adjustment and adjustment.kind == AdjustmentKind.ADD_RECORD:
        if adjustment.adjusted_in:
            first_in = ctx.local_time(adjustment.adjusted_in)
        if adjustment.adjusted_out:
            last_out = ctx.local_time(adjustment.adjusted_out)

    return EffectiveClock(first_in=first_in, last_out=last_out)


def _written_order(adj: Adjustment) -> float:
    return adj.updated_at.timestamp() if adj.updated_at else float("-inf")


def resolve_adjustment(adjustments: Sequence[Adjustment]) -> tuple[Optional[Adjustment], Optional[str]]:
    """Collapse the adjustments of one (employee, day) into one record.

    Ordered by updated_at (input order breaks ties); the latest record decides
    the kind and each override side comes from the latest record supplying it.
    Returns the merged record and a warning when more than one was found.
    """

    if not adjustments:
        return None, None
    if len(adjustments) == 1:
        return adjustments[0], None

    ordered = sorted(adjustments, key=_written_order)
    latest = ordered[-1]
    adjusted_in = next((a.adjusted_in for a in reversed(ordered) if a.adjusted_in), None)
    adjusted_out = next((a.adjusted_out for a in reversed(ordered) if a.adjusted_out), None)
    merged = replace(latest, adjusted_in=adjusted_in, adjusted_out=adjusted_out)

    warning = (
        f"{len(adjustments)} adjustments for {latest.employee_id} on "
        f"{latest.work_date.isoformat()}; the latest one was applied"
    )
    logger.warning(warning)
    return merged, warning


def group_adjustments_by_day(adjustments: Iterable[Adjustment]) -> dict[date, list[Adjustment]]:
    by_day: dict[date, list[Adjustment]] = defaultdict(list)
    for adj in adjustments:
        by_day[adj.work_date].append(adj)
    return by_day
