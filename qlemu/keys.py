"""Sinclair QL keyboard codes and modifier bits."""

from __future__ import annotations

from enum import IntEnum, IntFlag, unique


@unique
class QLKey(IntEnum):
    """Keyboard matrix codes of the QL's keys."""

    A = 0x1C
    B = 0x2C
    C = 0x2B
    D = 0x1E
    E = 0x0C
    F = 0x24
    G = 0x26
    H = 0x1A
    I = 0x12  # noqa: E741
    J = 0x1F
    K = 0x22
    L = 0x18
    M = 0x2E
    N = 0x06
    O = 0x17  # noqa: E741
    P = 0x1D
    Q = 0x0B
    R = 0x14
    S = 0x23
    T = 0x0E
    U = 0x0F
    V = 0x04
    W = 0x11
    X = 0x03
    Y = 0x16
    Z = 0x29

    DIGIT_0 = 0x0D
    DIGIT_1 = 0x1B
    DIGIT_2 = 0x09
    DIGIT_3 = 0x19
    DIGIT_4 = 0x3E
    DIGIT_5 = 0x3A
    DIGIT_6 = 0x0A
    DIGIT_7 = 0x3F
    DIGIT_8 = 0x08
    DIGIT_9 = 0x10

    F1 = 0x39
    F2 = 0x3B
    F3 = 0x3C
    F4 = 0x38
    F5 = 0x3D

    UP = 0x32
    DOWN = 0x37
    LEFT = 0x31
    RIGHT = 0x34

    SPACE = 0x36
    TAB = 0x13
    ENTER = 0x30
    ESCAPE = 0x33
    CAPSLOCK = 0x21
    LBRACKET = 0x20
    RBRACKET = 0x28
    SEMICOLON = 0x27
    COMMA = 0x07
    PERIOD = 0x2A
    SLASH = 0x05
    BACKSLASH = 0x35
    QUOTE = 0x2F
    POUND = 0x2D
    MINUS = 0x15
    EQUAL = 0x25
    SS = 0x45

    SC_56 = 0x40


class KeyModifier(IntFlag):
    """Bits combined with a key code."""

    SHIFT = 0x400
    CTRL = 0x200
    ALT = 0x100
    KEYPAD = 0x80


def shifted(key: int) -> int:
    """Return the code of ``key`` pressed with shift."""
    return int(KeyModifier.SHIFT) | int(key)