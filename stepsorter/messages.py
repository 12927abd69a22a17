from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .algorithms import Algorithm


class State(Enum):
    PAUSED  = "paused"
    RUNNING = "running"


class Kind(Enum):
    STEP      = "step"
    RESET     = "reset"
    PAUSE     = "pause"
    RESUME    = "resume"
    ALGORITHM = "algorithm"


@dataclass(frozen=True)
class Message:
    kind: Kind
    algorithm: Optional[Algorithm] = None


STEP   = Message(Kind.STEP)
RESET  = Message(Kind.RESET)
PAUSE  = Message(Kind.PAUSE)
RESUME = Message(Kind.RESUME)


def choose(algorithm: Algorithm) -> Message:
    return Message(Kind.ALGORITHM, algorithm)
