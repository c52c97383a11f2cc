"""Expose dashboard card render functions."""

from .card_clock import card_clock
from .card_history import card_history
from .card_search import card_search
from .card_weather import card_weather
from .card_quote import card_quote

__all__ = [
    "card_clock",
    "card_history",
    "card_search",
    "card_weather",
    "card_quote",
]
