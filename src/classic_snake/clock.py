# clock.py
class TickClock:
    """
    Gates game ticks against a (possibly changing) interval.

    The frame loop runs much faster than the game; movement only happens
    when at least `interval_ms` has passed since the last tick.
    """

    def __init__(self, now_ms: int = 0):
        self.last_tick = now_ms

    def due(self, now_ms: int, interval_ms: int) -> bool:
        """Return True if a tick should run now, and re-arm for the next one."""
        if now_ms - self.last_tick < interval_ms:
            return False  # not time to move yet
        # Re-arm from now rather than last_tick + interval to avoid catch-up bursts
        self.last_tick = now_ms
        return True

    def hold(self, now_ms: int) -> None:
        """Keep the clock armed while the game is not running."""
        self.last_tick = now_ms
