# core/clock.py — simulation time and speed control

from settings import SPEED_STEPS, MAX_FRAME_DELTA


class SimClock:
    """
    Converts real elapsed seconds into a simulated delta.

    Real frame time is clamped to MAX_FRAME_DELTA (a dragged window or a
    breakpoint must not teleport robots across the map), then scaled by the
    current speed step. A speed of 0 pauses the simulation.
    """

    def __init__(self) -> None:
        self._speed_index = 1          # default 1x
        self.elapsed: float = 0.0      # simulated seconds since start
        self.ticks: int = 0            # simulated steps taken

    # --- Speed control ---

    @property
    def speed(self) -> int:
        return SPEED_STEPS[self._speed_index]

    @property
    def paused(self) -> bool:
        return self.speed == 0

    def cycle_speed(self) -> None:
        self._speed_index = (self._speed_index + 1) % len(SPEED_STEPS)

    def set_speed_index(self, index: int) -> None:
        if 0 <= index < len(SPEED_STEPS):
            self._speed_index = index

    # --- Tick ---

    def advance(self, real_dt: float) -> float:
        """Return the simulated delta for a frame that took real_dt seconds."""
        if self.paused:
            return 0.0

        delta = min(real_dt, MAX_FRAME_DELTA) * self.speed
        self.elapsed += delta
        self.ticks += 1
        return delta

    def format(self) -> str:
        minutes, seconds = divmod(int(self.elapsed), 60)
        return f"{minutes:02d}:{seconds:02d}"
