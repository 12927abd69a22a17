import logging
from typing import Optional

from .algorithms import Algorithm
from .events import StepEvent

log = logging.getLogger(__name__)


def is_ordered(arr) -> bool:
    """True when every adjacent pair satisfies left <= right."""
    return all(arr[i] <= arr[i+1] for i in range(len(arr) - 1))


class SortEngine:
    """
    Drives one algorithm over one array, one comparison per step().

    The engine keeps no reference to the array between calls; the caller
    passes the same array to every step() and may read it freely in
    between. Reset or algorithm change means building a new engine.
    """

    def __init__(self, algorithm: Algorithm):
        self.algorithm = algorithm
        self.steps     = 0
        self._state    = algorithm.new_state()
        self._length: Optional[int] = None

    @property
    def finished(self) -> bool:
        return self._state.done

    def step(self, arr) -> Optional[StepEvent]:
        """
        Perform one unit of work on arr in place.

        Returns the event for that unit, or None once the algorithm has
        nothing left to compare. Calls after that leave arr untouched.
        """
        n = len(arr)
        if self._length is None:
            self._length = n
            log.debug("%s started on %d elements", self.algorithm.label, n)
        elif n != self._length:
            raise ValueError(
                f"{self.algorithm.label} was started on {self._length} elements, got {n}"
            )

        state = self._state
        if state.done:
            return None

        if n < 2:
            state.done = True
            if n == 0:
                return None
            self.steps += 1
            return StepEvent((None, None))

        if self.steps == 0:
            state.start(arr)
        event = state.advance(arr)
        self.steps += 1
        if state.done:
            log.debug("%s finished after %d steps", self.algorithm.label, self.steps)
        return event
