# function-shape contracts and small value objects shared by the demos

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List

# single-shape contracts, each lambda in the demos is bound to one of these
EmptyFunction = Callable[[], None]
StringFunction = Callable[[str], str]
DualFunction = Callable[[int, int], int]
GuessConsumer = Callable[[float], None]

@dataclass(frozen=True)
class Demo:
    # immutable registry entry, the dispatcher looks these up by key
    key: str
    summary: str
    action: EmptyFunction

def sample_guesses() -> List[float]:
    # built fresh per call so no demo ever sees another's list
    guesses: List[float] = []
    guesses.append(719.210)
    guesses.append(719.768)
    guesses.append(719.771)
    guesses.append(719.77125)
    return guesses
