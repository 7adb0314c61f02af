from __future__ import annotations

import logging
import typing as tp
from datetime import datetime

from .shared import Counter

log = logging.getLogger(__name__)

class CounterStore:
    '''
    Ordered, in-memory. Lives as long as the app that owns it.
    '''
    def __init__(self, /, counters: tp.Iterable[Counter] = ()) -> None:
        self.__counters: list[Counter] = list(counters)

    @property
    def counters(self) -> tuple[Counter, ...]:
        return tuple(self.__counters)

    def __len__(self) -> int:
        return len(self.__counters)

    def __iter__(self) -> tp.Iterator[Counter]:
        return iter(self.counters)

    def add(self, counter: Counter) -> None:
        self.__counters.append(counter)
        log.debug(
            'Added counter %r starting %s (%d total)',
            counter.title, counter.start.isoformat(), len(self.__counters),
        )

    def renderAll(self, now: datetime) -> list[tuple[Counter, str, str]]:
        return [(c, *c.render(now)) for c in self.__counters]
