from .UI import UI as HowLongSinceUI
from .elapsed import formatElapsed
from .shared import Counter
from .store import CounterStore
from .config import loadConfig

__all__ = ["HowLongSinceUI", "formatElapsed", "Counter", "CounterStore", "loadConfig"]
