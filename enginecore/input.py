"""Keyboard and mouse state tracking."""

from __future__ import annotations

from enum import IntEnum

from .vector import Vector


class KeyCode(IntEnum):
    """Virtual key codes."""

    BACKSPACE = 0x08
    TAB = 0x09
    ENTER = 0x0D
    SHIFT = 0x10
    CTRL = 0x11
    CONTROL = 0x11
    ALT = 0x12
    PAUSE = 0x13
    CAPS_LOCK = 0x14
    ESC = 0x1B
    ESCAPE = 0x1B
    SPACE = 0x20
    PAGE_UP = 0x21
    PAGE_DOWN = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SNAPSHOT = 0x2C
    PRINT_SCREEN = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    DIGIT_0 = 0x30
    DIGIT_1 = 0x31
    DIGIT_2 = 0x32
    DIGIT_3 = 0x33
    DIGIT_4 = 0x34
    DIGIT_5 = 0x35
    DIGIT_6 = 0x36
    DIGIT_7 = 0x37
    DIGIT_8 = 0x38
    DIGIT_9 = 0x39
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    NUM_0 = 0x60
    NUM_1 = 0x61
    NUM_2 = 0x62
    NUM_3 = 0x63
    NUM_4 = 0x64
    NUM_5 = 0x65
    NUM_6 = 0x66
    NUM_7 = 0x67
    NUM_8 = 0x68
    NUM_9 = 0x69
    NUM_MUL = 0x6A
    NUM_ADD = 0x6B
    NUM_SUB = 0x6D
    NUM_DOT = 0x6E
    NUM_DIV = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87
    NUM_LOCK = 0x90
    SCROLL_LOCK = 0x91
    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LALT = 0xA4
    RALT = 0xA5


_KNOWN_CODES = {int(code) for code in KeyCode}


def _key_index(key):
    """Reduce a key to its 8-bit code, as raw key messages are."""
    return int(key) & 0xFF


def _as_key(code):
    return KeyCode(code) if code in _KNOWN_CODES else code


def calc_ndc_pos(pos, window_size):
    """Map a window pixel position to normalised device coordinates in [-1, 1]."""
    return Vector(
        pos.x / (window_size.x / 2) - 1,
        pos.y / (window_size.y / 2) - 1,
        0.0,
    )


def _copy(v):
    return Vector(v.x, v.y, v.z)


class PlayerInput:
    """Held and just-pressed state of keys and the two mouse buttons.

    Buttons are indexed by ``is_right``: False for the left button, True for
    the right one.
    """

    def __init__(self):
        self._keys: set[int] = set()
        self._once_keys: set[int] = set()
        self._mouse = [False, False]
        self._once_mouse = [False, False]
        self._mouse_down_pos = [Vector(), Vector()]
        self._mouse_down_ndc_pos = [Vector(), Vector()]
        self.mouse_prev_pos = Vector()
        self.mouse_pos = Vector()
        self.mouse_ndc_pos = Vector()

    def key_down(self, key):
        code = _key_index(key)
        self._keys.add(code)
        self._once_keys.add(code)

    def key_once_up(self, key):
        """Clear the just-pressed flag, e.g. for an auto-repeated key message."""
        self._once_keys.discard(_key_index(key))

    def key_up(self, key):
        code = _key_index(key)
        self._keys.discard(code)
        self._once_keys.discard(code)

    def is_pressed_key(self, key):
        return _key_index(key) in self._keys

    def get_key_down(self, key):
        """Return True if the key went down since the last expiry."""
        return _key_index(key) in self._once_keys

    def pressed_keys(self):
        """Return the held keys in ascending code order."""
        return [_as_key(code) for code in sorted(self._keys)]

    def mouse_key_down(self, point, window_size, is_right):
        i = int(bool(is_right))
        self._mouse[i] = True
        self._once_mouse[i] = True
        self._mouse_down_pos[i] = _copy(point)
        self._mouse_down_ndc_pos[i] = calc_ndc_pos(point, window_size)

    def mouse_key_up(self, point, window_size, is_right):
        i = int(bool(is_right))
        self._mouse[i] = False
        self._once_mouse[i] = False

    def pre_process_input(self):
        """Prepare for a new frame."""
        self.expire_once()

    def expire_once(self):
        """Forget which keys and buttons were just pressed."""
        self._once_mouse = [False, False]
        self._once_keys.clear()

    def is_pressed_mouse(self, is_right):
        return self._mouse[int(bool(is_right))]

    def get_mouse_down(self, is_right):
        return self._once_mouse[int(bool(is_right))]

    def mouse_down_pos(self, is_right):
        return _copy(self._mouse_down_pos[int(bool(is_right))])

    def mouse_down_ndc_pos(self, is_right):
        return _copy(self._mouse_down_ndc_pos[int(bool(is_right))])

    def set_mouse_pos(self, pos):
        """Record a new cursor position, keeping the old one as the previous."""
        self.mouse_prev_pos = self.mouse_pos
        self.mouse_pos = _copy(pos)