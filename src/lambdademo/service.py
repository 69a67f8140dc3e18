# the demonstrations and the dispatcher that picks one of them by selector.
# every behavior here is a lambda bound to a name typed by one of the contracts in models

from __future__ import annotations
import logging
from typing import Dict, Iterable, List
from .models import (
    Demo,
    DualFunction,
    EmptyFunction,
    GuessConsumer,
    StringFunction,
    sample_guesses,
)

logger = logging.getLogger(__name__)

DEFAULT_SELECTOR = "0"

# process-wide transforms, never reassigned
exclaim: StringFunction = lambda n: n + "!"
ask: StringFunction = lambda n: n + "?"

def print_formatted(text: str, fmt: StringFunction) -> None:
    # run a string transform and print what it produced
    print(fmt(text))

def for_each(items: Iterable[float], action: GuessConsumer) -> None:
    for item in items:
        action(item)

# zero-parameter lambda
empty: EmptyFunction = lambda: print("No parameters here!")

# one-parameter lambda
write_message: StringFunction = lambda message: "The message is as follows:\n" + message

# two-parameter lambda
multiplication: DualFunction = lambda a, b: a * b

def ex_message() -> None:
    message = write_message("Tada!  This is the result of another Lambda Expression")
    message = exclaim(message)
    print(message)

def ex_product() -> None:
    a = 99
    b = 101
    product = multiplication(a, b)
    print(f"The product of {a} and {b} is {product}")

def ex_list() -> None:
    # inline lambda handed straight to the iteration helper
    guesses = sample_guesses()
    for_each(guesses, lambda n: print(f"Next guess is: {n}"))

def ex_consumer_list() -> None:
    # same iteration, but the lambda is first bound to a typed consumer
    guesses = sample_guesses()
    method: GuessConsumer = lambda n: print(f"Consumer says the next guess is: {n}")
    for_each(guesses, method)

def ex_method() -> None:
    # local transforms behaving like the module-level exclaim and ask
    exclamatory: StringFunction = lambda n: n + "!"
    interrogative: StringFunction = lambda n: n + "?"
    print_formatted("Local hello", exclamatory)
    print_formatted("Local hello", interrogative)

def ex_static_method() -> None:
    print_formatted("Static hello", exclaim)
    print_formatted("Static hello", ask)

_DEMOS: Dict[str, Demo] = {
    d.key: d
    for d in (
        Demo("0", "zero-parameter lambda", empty),
        Demo("1", "single-parameter lambda", ex_message),
        Demo("2", "two-parameter lambda", ex_product),
        Demo("3", "inline lambda passed to an iteration helper", ex_list),
        Demo("4", "typed consumer passed to an iteration helper", ex_consumer_list),
        Demo("5", "locally defined lambdas", ex_method),
        Demo("6", "module-level lambdas", ex_static_method),
    )
}

def list_demos() -> List[Demo]:
    return sorted(_DEMOS.values(), key=lambda d: d.key)

def run(selector: str) -> None:
    # run the demo registered under selector, unknown selectors fall back to the zero-parameter demo
    demo = _DEMOS.get(selector)
    if demo is None:
        logger.debug("no demo for selector %r, using %r", selector, DEFAULT_SELECTOR)
        demo = _DEMOS[DEFAULT_SELECTOR]
    logger.debug("running demo %s (%s)", demo.key, demo.summary)
    demo.action()
    # closing line common to every selector
    print_formatted("All done", exclaim)
