"""Text rendering of DX7 banks and voices."""

from dx7dump.rendering.listing import (
    DumpOptions,
    iter_bank,
    render_bank,
    render_long,
    render_short,
    render_voice,
)

__all__ = [
    "DumpOptions",
    "iter_bank",
    "render_bank",
    "render_long",
    "render_short",
    "render_voice",
]
