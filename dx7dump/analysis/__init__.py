"""Analysis tools for DX7 banks."""

from dx7dump.analysis.duplicates import find_duplicates, format_duplicates

__all__ = ["find_duplicates", "format_duplicates"]
