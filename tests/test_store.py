import logging
from datetime import datetime, timedelta

from how_long_since.shared import Counter
from how_long_since.store import CounterStore

NOW = datetime(2024, 6, 15, 12, 0, 0)

def test_starts_empty():
    store = CounterStore()
    assert len(store) == 0
    assert store.counters == ()
    assert store.renderAll(NOW) == []

def test_keeps_insertion_order_and_duplicates():
    store = CounterStore()
    a = Counter(title='Gym', start=NOW - timedelta(days=2))
    b = Counter(title='Gym', start=NOW - timedelta(days=400))
    store.add(a)
    store.add(b)
    assert store.counters == (a, b)
    assert list(store) == [a, b]
    assert store.renderAll(NOW) == [
        (a, '2 days', '0y 0m 2d 0h 0m 0s'),
        (b, '1 years', '1y 1m 10d 0h 0m 0s'),
    ]

def test_counters_view_is_a_snapshot():
    store = CounterStore([Counter(title='x', start=NOW)])
    view = store.counters
    store.add(Counter(title='y', start=NOW))
    assert len(view) == 1
    assert len(store) == 2

def test_add_is_logged(caplog):
    store = CounterStore()
    with caplog.at_level(logging.DEBUG, logger='how_long_since.store'):
        store.add(Counter(title='Haircut', start=NOW))
    assert "'Haircut'" in caplog.text
