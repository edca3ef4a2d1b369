from radix import MAX_VALUE, Base, derive_buffers, parse


QUIT_KEYS = ("q", "ctrl+c")
LEFT_KEYS = ("left", "h")
RIGHT_KEYS = ("right", "l")
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")


class ConverterModel:
    """Four digit buffers kept in sync, one per base, plus a cursor in the active one.

    Only the active buffer is ever edited directly. After every edit the other
    three are re-derived from its numeric value, and a value of zero is stored
    as four empty buffers.
    """

    def __init__(self, start_base: Base = Base.DECIMAL):
        self.buffers: dict[Base, str] = {b: "" for b in Base.ordered()}
        self.mode = start_base
        self.cursor = 0

    # ---------- state helpers ----------
    @property
    def text(self) -> str:
        return self.buffers[self.mode]

    @property
    def value(self) -> int:
        return parse(self.text, self.mode)

    def _set_cursor(self, pos):
        self.cursor = max(0, min(pos, len(self.text)))

    def _rederive(self, text):
        self.buffers = derive_buffers(text, self.mode)

    # ---------- key handling ----------
    def handle_key(self, key):
        """Apply one symbolic key.

        Returns "quit" to end the session, "reset_blink" when the active base
        or cursor moved, otherwise None.
        """
        if key is None:
            return None

        old_mode = self.mode
        old_cursor = self.cursor

        if len(key) == 1 and self.mode.is_valid_digit(key):
            self._insert_digit(key)
        elif key in QUIT_KEYS:
            return "quit"
        elif key in LEFT_KEYS:
            self._set_cursor(self.cursor - 1)
        elif key in RIGHT_KEYS:
            self._set_cursor(self.cursor + 1)
        elif key in UP_KEYS:
            self.mode = self.mode.prev()
            self._set_cursor(self.cursor)
        elif key in DOWN_KEYS:
            self.mode = self.mode.next()
            self._set_cursor(self.cursor)
        elif key == "backspace":
            self._delete_before_cursor()

        if self.mode != old_mode or self.cursor != old_cursor:
            return "reset_blink"
        return None

    def _insert_digit(self, ch):
        # no leading zeros
        if ch == "0" and self.cursor == 0:
            return
        text = self.text[: self.cursor] + ch + self.text[self.cursor :]
        if parse(text, self.mode) > MAX_VALUE:
            return
        self._rederive(text)
        self._set_cursor(self.cursor + 1)

    def _delete_before_cursor(self):
        if self.cursor == 0:
            return
        text = self.text[: self.cursor - 1] + self.text[self.cursor :]
        self.cursor -= 1
        self._rederive(text)
        self._set_cursor(self.cursor)

    # ---------- rendering ----------
    def cursor_cell(self) -> str:
        if self.cursor < len(self.text):
            return self.text[self.cursor]
        return " " if self.text else "0"

    def render_lines(self):
        lines = []
        for base in Base.ordered():
            text = self.buffers[base]
            if base is self.mode:
                before = text[: self.cursor]
                after = text[self.cursor + 1 :]
                lines.append((base.label, before, self.cursor_cell(), after, True))
            else:
                lines.append((base.label, text or "0", "", "", False))
        return lines

    def render(self) -> str:
        out = []
        for label, before, cell, after, _active in self.render_lines():
            out.append(f"{label}: {before}{cell}{after}")
        return "\n".join(out) + "\n"
