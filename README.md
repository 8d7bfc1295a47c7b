# qlemu

Building blocks for a Sinclair QL emulator, in plain Python with no
third-party dependencies.

## Modules

- `qlemu.memory` has `QLMemory(size)`, a flat big-endian memory addressed
  from zero. `read_word` and `read_long` return unsigned 16- and 32-bit
  values. `write_word` and `write_long` store the low 16 or 32 bits of a
  value. `read_bytes` and `write_bytes` copy raw bytes. An access outside
  the memory raises `IndexError`. `len()` gives the size.
- `qlemu.geometry` has the frozen dataclass `ScreenGeometry` with the fields
  `xres`, `yres`, `linel`, `qm_lo` and `qm_len`. The defaults are 512x256
  with the standard screen at `0x20000`. `parse_screen("800x600")` returns
  a `ScreenGeometry`, and the separator may be `x` or `X`. Each dimension is
  raised to at least 512 and 256. For a malformed string it issues a
  warning and returns the default geometry.
- `qlemu.xscreen` patches QL system memory so that the system can use a
  screen bigger than 512x256:
  - `look_for(memory, address, value, limit)` searches in word steps for a
    long value. It returns the address where it found it, or `None`.
  - `patch_pointer_environment(memory, pc, screen)` finds the Pointer
    Environment's standard screen definition near `pc` and rewrites it. It
    returns `True` on success. Otherwise it warns and returns `False`.
  - `scan_patch_channels(memory, driver_address, screen)` walks the channel
    table and skips closed channels. It points each channel of the given
    driver at the new line length and screen base, and returns the patched
    channel addresses.
  - `widen_window(memory, channel, width, height, x, y, screen)` sets the
    channel's window bounds, allowing for the border width, when the window
    goes beyond the standard screen. It returns whether it did so.
  - `mangled_device_name(device, params, screen)` gives the replacement
    open name, such as `"SCR___3"`, for an oversized window that still fits
    the screen. It returns `None` when the name needs no change.
  - `set_channel_bounds(memory, channel, params, screen)` sets the window,
    line length and screen base of a newly opened channel.
- `qlemu.headers` has two dataclasses, `QEmulatorHeader` and
  `QdosFileHeader`, each with `to_bytes()` and `from_bytes(data)`:
  - `QEmulatorHeader` is the `]!QDOS File Header` header, 30 bytes long, or
    44 bytes when `extra` holds 14 bytes.
  - `QdosFileHeader` is the 64-byte QDOS directory header. Its name holds
    at most 36 Latin-1 characters.
  - Malformed input raises `ValueError`.
- `qlemu.keys` has:
  - `QLKey`, the QL keyboard matrix codes.
  - `KeyModifier`, with `SHIFT`, `CTRL`, `ALT` and `KEYPAD`.
  - `shifted(key)`, which returns the key's code with the shift bit set.
- `qlemu.iptraps` has `IPTrap`, the operation numbers of the TCP/IP
  device's I/O trap.

## Example

```python
from qlemu.geometry import parse_screen
from qlemu.keys import QLKey, shifted

screen = parse_screen("1024x768")
print(screen.xres, screen.yres)   # 1024 768

code = shifted(QLKey.A)            # 0x41c
```

## What it does not do

This package does not run QL software. It has no 68000 processor, no
display window, no keyboard or mouse input, no devices and no command to
start. It gives the memory model, the screen patches, the codes and the
header formats that such an emulator would use.

## Running the tests

```
pip install -e .[test]
pytest
```