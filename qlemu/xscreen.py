"""Support for screens larger than the standard 512x256 display.

These routines patch the Pointer Environment screen definition and the
console driver's channel blocks so that windows may use the whole of a
bigger emulated screen.
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence

from .geometry import MIN_XRES, MIN_YRES, ScreenGeometry
from .memory import QLMemory

STANDARD_SCREEN_BASE = 0x20000
STANDARD_SCREEN_LENGTH = 0x8000
STANDARD_LINE_LENGTH = 0x80

CHANNEL_TABLE_BASE = 0x28078
CHANNEL_TABLE_TOP = 0x2807C

_SCREENDEF_SIZE = 14
_CH_XORIGIN = 0x18
_CH_YORIGIN = 0x1A
_CH_XSIZE = 0x1C
_CH_YSIZE = 0x1E
_CH_BORDER = 0x20
_CH_SCREEN_BASE = 0x32
_CH_LINE_LENGTH = 0x64

_PTR_SEARCH_BACK = 8000
_PTR_SEARCH_LIMIT = 24000


def look_for(memory: QLMemory, address: int, value: int, limit: int) -> int | None:
    """Search word-aligned steps from ``address`` for the long ``value``.

    Returns the address where it was found, or None.  A match on the last
    of the ``limit`` steps does not count.
    """
    last = len(memory) - 4
    for step in range(limit - 1):
        candidate = address + 2 * step
        if candidate > last:
            break
        if memory.read_long(candidate) == value:
            return candidate
    return None


def _is_standard_screendef(memory: QLMemory, address: int) -> bool:
    if address + _SCREENDEF_SIZE > len(memory):
        return False
    return (
        memory.read_long(address + 4) == STANDARD_SCREEN_LENGTH
        and memory.read_word(address + 8) == STANDARD_LINE_LENGTH
        and memory.read_word(address + 10) == MIN_XRES
        and memory.read_word(address + 12) == MIN_YRES
    )


def patch_pointer_environment(memory: QLMemory, pc: int, screen: ScreenGeometry) -> bool:
    """Rewrite the Pointer Environment's screen definition near ``pc``.

    Returns True if the definition was found and patched; otherwise warns
    and returns False.
    """
    address: int | None = max(pc - _PTR_SEARCH_BACK, 0)
    while (address := look_for(memory, address, STANDARD_SCREEN_BASE, _PTR_SEARCH_LIMIT)) is not None:
        if _is_standard_screendef(memory, address):
            memory.write_long(address, screen.qm_lo)
            memory.write_long(address + 4, screen.qm_len)
            memory.write_word(address + 8, screen.linel)
            memory.write_word(address + 10, screen.xres)
            memory.write_word(address + 12, screen.yres)
            return True
        address += 2
    warnings.warn("could not patch Pointer Environment", stacklevel=2)
    return False


def scan_patch_channels(memory: QLMemory, driver_address: int, screen: ScreenGeometry) -> list[int]:
    """Point every open channel of a driver at the enlarged screen.

    Returns the addresses of the channel blocks that were patched.
    """
    top = memory.read_long(CHANNEL_TABLE_TOP)
    start = memory.read_long(CHANNEL_TABLE_BASE)
    patched = []
    for entry in range(start, top + 1, 4):
        channel = memory.read_long(entry)
        # Closed channels have the top bit set.
        if channel & 0x80000000:
            continue
        if memory.read_long(channel + 4) == driver_address:
            memory.write_word(channel + _CH_LINE_LENGTH, screen.linel)
            memory.write_long(channel + _CH_SCREEN_BASE, screen.qm_lo)
            patched.append(channel)
    return patched


def _write_bounds(memory: QLMemory, channel: int, width: int, height: int, x: int, y: int) -> None:
    border = memory.read_word(channel + _CH_BORDER)
    memory.write_word(channel + _CH_XORIGIN, x + border * 2)
    memory.write_word(channel + _CH_YORIGIN, y + border)
    memory.write_word(channel + _CH_XSIZE, width - border * 4)
    memory.write_word(channel + _CH_YSIZE, height - border * 2)


def widen_window(
    memory: QLMemory,
    channel: int,
    width: int,
    height: int,
    x: int,
    y: int,
    screen: ScreenGeometry,
) -> bool:
    """Handle a window redefinition that leaves the standard screen.

    Returns True if the channel block was updated here, False if the
    request should go to the driver's own handler.
    """
    right = width + x
    bottom = height + y
    if right > MIN_XRES or (bottom > MIN_YRES and right <= screen.xres and bottom <= screen.yres):
        _write_bounds(memory, channel, width, height, x, y)
        return True
    return False


def mangled_device_name(device: str, params: Sequence[int], screen: ScreenGeometry) -> str | None:
    """Return the device name to open instead for a window beyond 512x256.

    ``params`` holds width, height, x, y and the channel number (negative
    if none).  Returns None if the name needs no change.
    """
    width, height, x, y, number = params[:5]
    right = width + x
    bottom = height + y
    if right <= MIN_XRES and bottom <= MIN_YRES:
        return None
    if right > screen.xres or bottom > screen.yres:
        return None
    if number >= 0:
        return f"{device}__{number}"
    return device


def set_channel_bounds(memory: QLMemory, channel: int, params: Sequence[int], screen: ScreenGeometry) -> None:
    """Set a freshly opened channel's real window and screen address."""
    width, height, x, y = params[:4]
    _write_bounds(memory, channel, width, height, x, y)
    memory.write_word(channel + _CH_LINE_LENGTH, screen.linel)
    memory.write_long(channel + _CH_SCREEN_BASE, screen.qm_lo)