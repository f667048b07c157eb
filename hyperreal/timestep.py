"""Frame time step."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """Elapsed time between two frames, in seconds."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    @property
    def seconds(self) -> float:
        return float(self.time)

    @property
    def milliseconds(self) -> float:
        return self.time * 1000.0

    def __mul__(self, other: float) -> float:
        return self.time * float(other)

    __rmul__ = __mul__