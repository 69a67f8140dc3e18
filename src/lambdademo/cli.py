# process boundary: turns argv (or the environment) into a selector and hands it to the service.
# all env/config reading lives here, so service stays pure apart from printing

from __future__ import annotations
import logging
import os
import sys
from typing import List, Optional
from dotenv import load_dotenv
from .service import list_demos, run

load_dotenv()  # lets a local .env provide LAMBDA_DEMO_SELECTOR / LAMBDA_DEMO_LOG_LEVEL

SELECTOR_ENV = "LAMBDA_DEMO_SELECTOR"
LOG_LEVEL_ENV = "LAMBDA_DEMO_LOG_LEVEL"

logger = logging.getLogger(__name__)

class SelectorError(RuntimeError):
    # raised when no selector can be found in argv or the environment
    pass

def resolve_selector(argv: List[str]) -> str:
    # first positional argument wins, anything after it is ignored
    if argv:
        return argv[0]
    selector = os.getenv(SELECTOR_ENV)
    if selector:
        logger.debug("selector %r taken from %s", selector, SELECTOR_ENV)
        return selector
    keys = ", ".join(d.key for d in list_demos())
    raise SelectorError(f"missing selector: pass one of {keys} or set {SELECTOR_ENV}")

def log_level() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    # getLevelName maps known names to ints, anything else comes back as a string
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING

def _configure_logging() -> None:
    # diagnostics go to stderr so stdout carries only demo output
    logging.basicConfig(
        level=log_level(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

def main(argv: Optional[List[str]] = None) -> int:
    _configure_logging()
    args = sys.argv[1:] if argv is None else argv
    try:
        selector = resolve_selector(args)
    except SelectorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    run(selector)
    return 0

if __name__ == "__main__":
    sys.exit(main())
