import typing as tp
from datetime import datetime

from textual.widget import Widget
from textual.widgets import Static
from textual.containers import Container

from .shared import Counter

class CounterCard(Container):
    def __init__(self, counter: Counter, now: datetime, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.counter = counter
        self.rounded_label, self.exact_label = counter.render(now)

        self.titleStatic   = Static(
            counter.title, markup=False, classes='counter-title',
        )
        self.roundedStatic = Static(self.rounded_label, classes='counter-rounded')
        self.exactStatic   = Static(self.exact_label,   classes='counter-exact')

    def compose(self) -> tp.Iterable[Widget]:
        yield self.titleStatic
        yield self.roundedStatic
        yield self.exactStatic

    def refreshLabels(self, now: datetime) -> None:
        self.rounded_label, self.exact_label = self.counter.render(now)
        self.roundedStatic.update(self.rounded_label)
        self.exactStatic  .update(self.exact_label)
