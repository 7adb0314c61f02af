from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from textual.widget import Widget

from .elapsed import formatElapsed

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'

class Counter(BaseModel):
    title: str
    start: datetime

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('start')
    @classmethod
    def truncate_to_seconds(cls, v: datetime) -> datetime:
        return v.replace(microsecond=0)

    def render(self, now: datetime) -> tuple[str, str]:
        return formatElapsed(self.start, now)

def parseStart(
    date_text: str, time_text: str, base: datetime | None = None,
) -> datetime:
    '''
    `date_text` is `YYYY-MM-DD`, `time_text` is 24-hour `HH:MM`.
    Seconds are carried over from `base` (defaults to now),
    the moment the form was opened.
    '''
    if base is None:
        base = datetime.now()
    try:
        date = datetime.strptime(date_text.strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f'Date must look like 2024-01-31, got {date_text!r}')
    try:
        time = datetime.strptime(time_text.strip(), TIME_FORMAT).time()
    except ValueError:
        raise ValueError(f'Time must look like 13:45, got {time_text!r}')
    return base.replace(
        year=date.year, month=date.month, day=date.day,
        hour=time.hour, minute=time.minute, microsecond=0,
    )

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
