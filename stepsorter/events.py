from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StepEvent:
    """
    What a single engine step touched.

    Attributes
    ----------
    compared : (int | None, int | None)  — positions examined this step.
                                           When a swap happened these are the
                                           swapped positions.
    swapped  : bool                      — True if the array changed this step.
    """
    compared: Tuple[Optional[int], Optional[int]] = (None, None)
    swapped: bool = False

    @property
    def indices(self) -> list:
        """Compared positions with the missing ones dropped."""
        return [i for i in self.compared if i is not None]
