import pytest

from qlemu.geometry import ScreenGeometry
from qlemu.memory import QLMemory
from qlemu.xscreen import (
    look_for,
    mangled_device_name,
    patch_pointer_environment,
    scan_patch_channels,
    set_channel_bounds,
    widen_window,
)

BIG = ScreenGeometry(xres=1024, yres=768, linel=256, qm_lo=0x40000, qm_len=0x30000)


def _write_screendef(memory, address, length=0x8000):
    memory.write_long(address, 0x20000)
    memory.write_long(address + 4, length)
    memory.write_word(address + 8, 0x80)
    memory.write_word(address + 10, 0x200)
    memory.write_word(address + 12, 0x100)


def test_look_for_finds_value():
    memory = QLMemory(0x100)
    memory.write_long(0x20, 0xCAFEBABE)
    assert look_for(memory, 0x10, 0xCAFEBABE, 100) == 0x20


def test_look_for_returns_none_when_absent():
    memory = QLMemory(0x100)
    assert look_for(memory, 0, 0xCAFEBABE, 1000) is None


def test_look_for_ignores_match_on_final_step():
    memory = QLMemory(0x100)
    memory.write_long(0x16, 0xCAFEBABE)
    assert look_for(memory, 0x10, 0xCAFEBABE, 4) is None
    assert look_for(memory, 0x10, 0xCAFEBABE, 5) == 0x16


def test_patch_pointer_environment_rewrites_definition():
    memory = QLMemory(0x10000)
    _write_screendef(memory, 0x4000)
    assert patch_pointer_environment(memory, 0x4100, BIG) is True
    assert memory.read_long(0x4000) == BIG.qm_lo
    assert memory.read_long(0x4004) == BIG.qm_len
    assert memory.read_word(0x4008) == BIG.linel
    assert memory.read_word(0x400A) == BIG.xres
    assert memory.read_word(0x400C) == BIG.yres


def test_patch_pointer_environment_skips_decoy():
    memory = QLMemory(0x10000)
    _write_screendef(memory, 0x3000, length=0x1234)
    _write_screendef(memory, 0x4000)
    assert patch_pointer_environment(memory, 0x4100, BIG) is True
    assert memory.read_long(0x3004) == 0x1234
    assert memory.read_long(0x4000) == BIG.qm_lo


def test_patch_pointer_environment_warns_when_missing():
    memory = QLMemory(0x10000)
    with pytest.warns(UserWarning, match="Pointer Environment"):
        assert patch_pointer_environment(memory, 0x4100, BIG) is False


def test_scan_patch_channels_patches_matching_driver():
    memory = QLMemory(0x30000)
    memory.write_long(0x28078, 0x28100)
    memory.write_long(0x2807C, 0x28108)
    memory.write_long(0x28100, 0x29000)
    memory.write_long(0x28104, 0x29100)
    memory.write_long(0x28108, 0xFFFF0000)
    memory.write_long(0x29004, 0x12000)
    memory.write_long(0x29104, 0x13000)

    assert scan_patch_channels(memory, 0x12000, BIG) == [0x29000]
    assert memory.read_word(0x29000 + 0x64) == BIG.linel
    assert memory.read_long(0x29000 + 0x32) == BIG.qm_lo
    assert memory.read_long(0x29100 + 0x32) == 0


def test_widen_window_beyond_width():
    memory = QLMemory(0x1000)
    assert widen_window(memory, 0x100, 600, 100, 20, 10, BIG) is True
    assert memory.read_word(0x118) == 20
    assert memory.read_word(0x11A) == 10
    assert memory.read_word(0x11C) == 600
    assert memory.read_word(0x11E) == 100


def test_widen_window_applies_border():
    memory = QLMemory(0x1000)
    memory.write_word(0x120, 1)
    assert widen_window(memory, 0x100, 400, 300, 0, 0, BIG) is True
    assert memory.read_word(0x118) == 2
    assert memory.read_word(0x11C) == 396


def test_widen_window_left_to_driver_for_small_window():
    memory = QLMemory(0x1000)
    assert widen_window(memory, 0x100, 400, 200, 0, 0, BIG) is False
    assert memory.read_bytes(0x100, 0x40) == bytes(0x40)


def test_widen_window_too_tall_for_screen():
    memory = QLMemory(0x1000)
    assert widen_window(memory, 0x100, 400, 300, 0, 0, ScreenGeometry()) is False


def test_mangled_name_with_number():
    assert mangled_device_name("SCR_", (600, 100, 0, 0, 3), BIG) == "SCR___3"


def test_mangled_name_without_number():
    assert mangled_device_name("CON_", (600, 100, 0, 0, -1), BIG) == "CON_"


def test_mangled_name_not_needed_for_small_window():
    assert mangled_device_name("SCR_", (400, 200, 10, 10, 1), BIG) is None


def test_mangled_name_not_used_when_too_big():
    assert mangled_device_name("SCR_", (2000, 100, 0, 0, 1), BIG) is None


def test_set_channel_bounds():
    memory = QLMemory(0x1000)
    set_channel_bounds(memory, 0x200, (700, 500, 30, 40), BIG)
    assert memory.read_word(0x218) == 30
    assert memory.read_word(0x21A) == 40
    assert memory.read_word(0x21C) == 700
    assert memory.read_word(0x21E) == 500
    assert memory.read_word(0x264) == BIG.linel
    assert memory.read_long(0x232) == BIG.qm_lo