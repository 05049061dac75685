"""Card counting systems."""

from engine.counting.base import CountingSystem
from engine.counting.hilo import HI_LO, HiLoSystem, count_cards

__all__ = [
    "CountingSystem",
    "HiLoSystem",
    "HI_LO",
    "count_cards",
]
