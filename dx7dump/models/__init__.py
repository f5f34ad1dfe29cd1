"""Data models for DX7 bank representation."""

from dx7dump.models.voice import Operator, Voice
from dx7dump.models.bank import Bank

__all__ = [
    "Operator",
    "Voice",
    "Bank",
]
