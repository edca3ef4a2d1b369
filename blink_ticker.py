import math
import time


class BlinkTicker:
    DEFAULT_INTERVAL = 0.53

    def __init__(self, interval: float = DEFAULT_INTERVAL, enabled: bool = True, clock=time.monotonic):
        self.interval = interval if interval and interval > 0 else self.DEFAULT_INTERVAL
        self.enabled = enabled
        self.clock = clock
        self.visible = True
        self.phase_start = self.clock()

    def reset(self, now=None):
        self.visible = True
        self.phase_start = self.clock() if now is None else now

    def tick(self, now=None) -> bool:
        """Flip visibility once per elapsed interval; True when the flag changed."""
        if not self.enabled:
            return False
        if now is None:
            now = self.clock()
        elapsed = now - self.phase_start
        if elapsed < self.interval:
            return False
        flips = int(elapsed // self.interval)
        self.phase_start += flips * self.interval
        if flips % 2 == 0:
            return False
        self.visible = not self.visible
        return True

    def timeout_ms(self, now=None) -> int:
        # -1 blocks getch until the next key
        if not self.enabled:
            return -1
        if now is None:
            now = self.clock()
        remaining = self.interval - (now - self.phase_start)
        # drop float noise so 0.2s reads as 200ms, not 201
        return max(1, math.ceil(round(remaining * 1000, 6)))
