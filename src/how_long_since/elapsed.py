'''
Elapsed time between two wall-clock moments, as a coarse label
("3 months") and an exact one ("0y 3m 0d 0h 0m 0s").

Years and months use fixed 365-day and 30-day lengths, not calendar ones.
'''

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

SECONDS_PER_DAY = 24 * 60 * 60
DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30

JUST_NOW = 'Just now'

def quot(a: int, b: int) -> int:
    '''
    Integer division truncating toward zero (not floor).
    '''
    q = abs(a) // b
    return q if a >= 0 else -q

def rem(a: int, b: int) -> int:
    '''
    Remainder matching `quot`. Takes the sign of `a`.
    '''
    return a - b * quot(a, b)

@dataclass(frozen=True)
class ElapsedBreakdown:
    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def between(cls, start: datetime, now: datetime) -> ElapsedBreakdown:
        delta = now - start
        # whole seconds, sub-second part floored
        total_seconds = delta.days * SECONDS_PER_DAY + delta.seconds
        total_days = quot(total_seconds, SECONDS_PER_DAY)
        return cls(
            years   = quot(total_days, DAYS_PER_YEAR),
            months  = quot(rem(total_days, DAYS_PER_YEAR), DAYS_PER_MONTH),
            # from total days, not what is left after years and months
            days    = rem(total_days, DAYS_PER_MONTH),
            hours   = rem(quot(total_seconds, 3600), 24),
            minutes = rem(quot(total_seconds, 60), 60),
            seconds = rem(total_seconds, 60),
        )

    def rounded(self) -> str:
        for value, unit in (
            (self.years, 'year'),
            (self.months, 'month'),
            (self.days, 'day'),
        ):
            if value != 0:
                return f'{value} {unit}s'
        return JUST_NOW

    def exact(self) -> str:
        return (
            f'{self.years}y {self.months}m {self.days}d '
            f'{self.hours}h {self.minutes}m {self.seconds}s'
        )

def formatElapsed(start: datetime, now: datetime) -> tuple[str, str]:
    '''
    Returns `(rounded_label, exact_label)` for the time from `start` to `now`.
    `start` may be after `now`, in which case the fields come out negative.
    '''
    breakdown = ElapsedBreakdown.between(start, now)
    return breakdown.rounded(), breakdown.exact()
