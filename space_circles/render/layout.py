from __future__ import annotations
from dataclasses import dataclass

TITLE_BREAKPOINT = 490      # px; narrower windows get the compact layout
EXTRA_PADDING = 10


@dataclass(frozen=True)
class TextLayout:
    big_size: int
    small_size: int
    text_padding: int
    extra_padding: int
    # vertical offset of the two game-over lines from the screen center
    overlay_offset: int


def text_layout(width: int) -> TextLayout:
    if width < TITLE_BREAKPOINT:
        return TextLayout(big_size=42, small_size=22, text_padding=40,
                          extra_padding=EXTRA_PADDING, overlay_offset=20)
    return TextLayout(big_size=64, small_size=34, text_padding=60,
                      extra_padding=EXTRA_PADDING, overlay_offset=35)
