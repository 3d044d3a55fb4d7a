"""The game clock, advanced in hundredths of a second."""

from dataclasses import dataclass

TIMER_CLOCK_HZ = 64_000_000
TIMER_PRESCALER = 9
TIMER_RELOAD = 63999
TICKS_PER_SECOND = TIMER_CLOCK_HZ // ((TIMER_PRESCALER + 1) * (TIMER_RELOAD + 1))


@dataclass
class Clock:
    """Time of day as hours, minutes, seconds and hundredths."""

    h: int = 0
    m: int = 0
    s: int = 0
    hs: int = 0

    def tick(self) -> None:
        """Advance by one hundredth of a second, wrapping after 24 hours."""
        self.hs += 1
        if self.hs < 100:
            return
        self.hs = 0
        self.s += 1
        if self.s < 60:
            return
        self.s = 0
        self.m += 1
        if self.m < 60:
            return
        self.m = 0
        self.h += 1
        if self.h >= 24:
            self.h = 0