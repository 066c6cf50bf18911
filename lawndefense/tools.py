"""Alpha blending of ARGB pixel buffers, clipping and frame timing."""

from __future__ import annotations

import time
from collections.abc import Callable, MutableSequence, Sequence
from typing import NamedTuple


class Clip(NamedTuple):
    """Visible part of an image placed on a window."""

    dst_x: int
    dst_y: int
    src_x: int
    src_y: int
    width: int
    height: int


def blend_pixel(src: int, dst: int) -> int:
    """Blend an ARGB source pixel over a destination pixel; the result has no alpha."""
    alpha = (src >> 24) & 0xFF
    inverse = 255 - alpha
    result = 0
    for shift in (16, 8, 0):
        s = (src >> shift) & 0xFF
        d = (dst >> shift) & 0xFF
        result |= (s * alpha // 255 + d * inverse // 255) << shift
    return result


def clip_rect(x: int, y: int, width: int, height: int, win_width: int, win_height: int) -> Clip | None:
    """Clip an image of the given size placed at (x, y) to the window.

    Returns None when no part of the image is visible.
    """
    src_x = src_y = 0
    if y < 0:
        src_y = -y
        height += y
        y = 0
    elif y >= win_height or x >= win_width:
        return None
    height = min(height, win_height - y)

    if x < 0:
        src_x = -x
        width += x
        x = 0
    if x > win_width - width:
        width = win_width - x

    if width <= 0 or height <= 0:
        return None
    return Clip(x, y, src_x, src_y, width, height)


def blend_image(
    dst: MutableSequence[int],
    dst_width: int,
    dst_height: int,
    src: Sequence[int],
    src_width: int,
    src_height: int,
    x: int,
    y: int,
) -> None:
    """Blend the row-major ARGB image src onto dst at (x, y), in place."""
    if len(dst) != dst_width * dst_height:
        raise ValueError("destination buffer does not match its dimensions")
    if len(src) != src_width * src_height:
        raise ValueError("source buffer does not match its dimensions")
    clip = clip_rect(x, y, src_width, src_height, dst_width, dst_height)
    if clip is None:
        return
    for row in range(clip.height):
        s0 = (clip.src_y + row) * src_width + clip.src_x
        d0 = (clip.dst_y + row) * dst_width + clip.dst_x
        dst[d0:d0 + clip.width] = [
            blend_pixel(s, d)
            for s, d in zip(src[s0:s0 + clip.width], dst[d0:d0 + clip.width])
        ]


def _milliseconds() -> int:
    return time.monotonic_ns() // 1_000_000


class DelayTimer:
    """Reports milliseconds elapsed since the previous call."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _milliseconds
        self._last: int | None = None

    def delay(self) -> int:
        """Milliseconds since the last call; zero on the first call."""
        now = self._clock()
        if self._last is None:
            self._last = now
            return 0
        elapsed = now - self._last
        self._last = now
        return int(elapsed)