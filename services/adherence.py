"""
Diet adherence summary.

Pure reduction over one owner's on-diet flags, ordered by record creation.
No I/O, no clock; safe to call inline from any request.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class AdherenceSummary:
    """Aggregate statistics for a sequence of meals"""

    total: int = 0
    on_diet_count: int = 0
    off_diet_count: int = 0
    best_streak: int = 0


def best_streak(flags: Iterable[bool]) -> int:
    """Length of the longest unbroken run of True values (0 when there is none)."""
    return summarize(flags).best_streak


def summarize(flags: Iterable[bool]) -> AdherenceSummary:
    """
    Count meals on and off the diet and find the best on-diet streak.

    Single left-to-right pass keeping the current run and the running
    maximum; a False resets the current run to zero.

    Args:
        flags: on_diet flags, oldest meal first. Only one owner's meals.

    Returns:
        AdherenceSummary with total == on_diet_count + off_diet_count
    """
    total = 0
    on_diet = 0
    current_run = 0
    best = 0

    for flag in flags:
        total += 1
        if flag:
            on_diet += 1
            current_run += 1
            best = max(best, current_run)
        else:
            current_run = 0

    return AdherenceSummary(
        total=total,
        on_diet_count=on_diet,
        off_diet_count=total - on_diet,
        best_streak=best,
    )
