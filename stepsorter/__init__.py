from .algorithms import Algorithm
from .engine import SortEngine, is_ordered
from .events import StepEvent

__all__ = ["Algorithm", "SortEngine", "StepEvent", "is_ordered"]
