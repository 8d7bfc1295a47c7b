"""Screen geometry and parsing of ``WIDTHxHEIGHT`` strings."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass

MIN_XRES = 512
MIN_YRES = 256

_NUMBER = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ScreenGeometry:
    """Resolution and memory layout of the emulated screen."""

    xres: int = MIN_XRES
    yres: int = MIN_YRES
    linel: int = 0x80
    qm_lo: int = 0x20000
    qm_len: int = 0x8000


def _bad_geometry(geometry: str) -> ScreenGeometry:
    warnings.warn(
        f"Bad geometry: {geometry}. Please use 'nXm' where n=x size, m=y size",
        stacklevel=3,
    )
    return ScreenGeometry()


def parse_screen(geometry: str) -> ScreenGeometry:
    """Parse ``nXm`` into a geometry no smaller than 512x256.

    A malformed string produces a warning and the default 512x256 geometry.
    """
    match = _NUMBER.match(geometry)
    if match is None:
        return _bad_geometry(geometry)
    xres = max(int(match.group(1)), MIN_XRES)

    rest = geometry[match.end():]
    if not rest or rest[0] not in "xX":
        return _bad_geometry(geometry)

    match = _NUMBER.match(rest, 1)
    if match is None:
        return _bad_geometry(geometry)
    yres = max(int(match.group(1)), MIN_YRES)

    return ScreenGeometry(xres=xres, yres=yres)