import logging
import typing as tp
from datetime import datetime

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import (
    Button, Footer, Header, Input, Static, ContentSwitcher,
)

from .shared import Counter, parseStart, titled, DATE_FORMAT, TIME_FORMAT
from .store import CounterStore
from .counter_card import CounterCard
from .config import Config

log = logging.getLogger(__name__)

class AddCounterScreen(Screen[Counter | None]):
    BINDINGS = [
        Binding("escape", "cancel", "Cancel."),
        Binding("ctrl+s", "save", "Save."),
    ]

    def __init__(self, opened_at: datetime, *args, **kw) -> None:
        '''
        `opened_at` pre-fills the date and time inputs.
        Its seconds survive into the saved start.
        '''
        super().__init__(*args, **kw)

        self.opened_at = opened_at.replace(microsecond=0)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Container(id="add-form"):
            yield Static("Add New Counter", id="add-heading")
            yield titled(Input(
                placeholder="What are you counting?", id="title-input",
            ), 'Title', skip_bottom=False)
            with titled(Horizontal(id="start-pane"), 'Start', skip_bottom=False):
                yield Input(
                    self.opened_at.strftime(DATE_FORMAT),
                    placeholder="YYYY-MM-DD", id="date-input",
                )
                yield Input(
                    self.opened_at.strftime(TIME_FORMAT),
                    placeholder="HH:MM", id="time-input",
                )
            with Horizontal(id="form-buttons"):
                yield Button("Cancel", id="cancel-btn")
                yield Button("Save", id="save-btn", variant="primary")
        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.query_one('#title-input', Input).focus()

    @on(Input.Submitted)
    def focus_save(self) -> None:
        self.query_one('#save-btn', Button).focus()

    @on(Button.Pressed, '#save-btn')
    def action_save(self) -> None:
        title = self.query_one('#title-input', Input).value
        try:
            start = parseStart(
                self.query_one('#date-input', Input).value,
                self.query_one('#time-input', Input).value,
                base=self.opened_at,
            )
        except ValueError as e:
            log.info('Rejected counter start: %s', e)
            self.notify(str(e), title='Invalid start', severity='error')
            return
        self.dismiss(Counter(title=title, start=start))

    @on(Button.Pressed, '#cancel-btn')
    def action_cancel(self) -> None:
        self.dismiss(None)

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("a", "add_counter", "Add."),
        Binding("r", "refresh_labels", "Refresh."),
        Binding("q", "quit", "Quit."),
    ]

    def __init__(
        self,
        config: Config | None = None,
        store: CounterStore | None = None,
        clock: tp.Callable[[], datetime] = datetime.now,
    ) -> None:
        '''
        `clock` supplies "now" for every refresh. Swap it in tests.
        '''
        super().__init__()

        self.config = config if config is not None else Config()
        self.store = store if store is not None else CounterStore()
        self.clock = clock

        self.counterList = VerticalScroll(id="counter-list")
        self.listSwitcher = ContentSwitcher(
            id="list-switcher", initial="list-empty",
        )

        self.title = "How Long Since"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with self.listSwitcher:
            yield Static(
                'Nothing counted yet. Press "a" to add a counter.',
                id="list-empty",
            )
            yield self.counterList
        yield Footer(compact=True)

    def on_mount(self) -> None:
        now = self.clock()
        cards = [self.makeCard(c, now) for c in self.store]
        if cards:
            self.counterList.mount_all(cards)
        self.updateSwitcher()
        self.set_interval(self.config.refresh_interval, self.refreshLabels)

    def makeCard(self, counter: Counter, now: datetime) -> CounterCard:
        return CounterCard(counter, now, classes="counter-card")

    def updateSwitcher(self) -> None:
        self.listSwitcher.current = (
            'list-empty' if len(self.store) == 0 else
            'counter-list'
        )

    def action_add_counter(self) -> None:
        if isinstance(self.screen, AddCounterScreen):
            return
        self.push_screen(AddCounterScreen(self.clock()), self.onCounterAdded)

    def onCounterAdded(self, counter: Counter | None) -> None:
        if counter is None:
            return
        self.store.add(counter)
        self.counterList.mount(self.makeCard(counter, self.clock()))
        self.updateSwitcher()

    def action_refresh_labels(self) -> None:
        self.refreshLabels()

    def refreshLabels(self) -> None:
        now = self.clock()
        for card in self.counterList.query(CounterCard):
            card.refreshLabels(now)
