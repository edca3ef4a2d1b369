import curses

from key_events import key_name
from status_bar import render_status


class Orchestrator:
    def __init__(self, stdscr, model, ticker, show_status=True):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.nodelay(False)

        self.model = model
        self.ticker = ticker
        self.show_status = show_status

    # ---------------- UI ----------------

    def _draw_line(self, row, line, width):
        label, before, cell, after, active = line
        prefix = f"{label}: "
        try:
            self.stdscr.addnstr(row, 0, prefix + before, width)
            if not active:
                return
            col = len(prefix) + len(before)
            if col >= width:
                return
            attr = curses.A_REVERSE if self.ticker.visible else curses.A_NORMAL
            self.stdscr.addnstr(row, col, cell, width - col, attr)
            if after and col + 1 < width:
                self.stdscr.addnstr(row, col + 1, after, width - col - 1)
        except curses.error:
            pass

    def redraw(self):
        self.stdscr.erase()
        h, w = self.stdscr.getmaxyx()

        lines = self.model.render_lines()
        for row, line in enumerate(lines):
            if row >= h:
                break
            self._draw_line(row, line, w)

        status_row = len(lines) + 1
        if self.show_status and status_row < h:
            text = render_status(
                {"mode_label": self.model.mode.label, "value": self.model.value},
                w - 1,
            )
            try:
                self.stdscr.addnstr(status_row, 0, text, w - 1, curses.A_DIM)
            except curses.error:
                pass

        self.stdscr.refresh()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.ticker.reset()
        self.redraw()

        while True:
            self.stdscr.timeout(self.ticker.timeout_ms())
            ch = self.stdscr.getch()

            if ch == -1:
                if self.ticker.tick():
                    self.redraw()
                continue

            result = self.model.handle_key(key_name(ch))
            if result == "quit":
                break
            if result == "reset_blink":
                self.ticker.reset()

            self.redraw()
