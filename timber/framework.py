"""Game clock with a scalable time rate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Framework:
    """Tracks scaled and real time across frames."""

    time_scale: float = 1.0
    time: float = 0.0
    delta_time: float = 0.0
    real_time: float = 0.0
    real_delta_time: float = 0.0

    def tick(self, real_dt: float) -> float:
        """Advance the clocks by ``real_dt`` seconds and return the scaled step."""
        self.real_delta_time = real_dt
        self.delta_time = real_dt * self.time_scale
        self.real_time += self.real_delta_time
        self.time += self.delta_time
        return self.delta_time


FRAMEWORK = Framework()