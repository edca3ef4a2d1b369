import curses


NAMED_KEYS = {
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_BACKSPACE: "backspace",
    127: "backspace",
    8: "backspace",  # Ctrl+H
    3: "ctrl+c",
}


def key_name(ch):
    if ch is None or ch == -1:
        return None
    name = NAMED_KEYS.get(ch)
    if name:
        return name
    if 32 <= ch <= 126:
        return chr(ch)
    return None
