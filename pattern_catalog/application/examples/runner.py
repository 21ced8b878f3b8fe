"""Named-example runner."""
import contextlib
import sys
from typing import Callable, Optional, TextIO

from pattern_catalog.domain.base.exceptions import ExampleExecutionError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

ExampleBlock = Callable[[], None]


def example_of(description: str, block: ExampleBlock, stream: Optional[TextIO] = None) -> None:
    """
    Print a header for ``description`` and run ``block``.

    Anything the block prints goes to ``stream`` (stdout by default).

    Raises:
        ExampleExecutionError: If the block raises.
    """
    if stream is None:
        stream = sys.stdout

    print(f"--- Example of: {description} ---", file=stream)
    logger.info("Running example", example=description)
    try:
        with contextlib.redirect_stdout(stream):
            block()
    except Exception as e:
        logger.error("Example failed", example=description, exc_info=True)
        raise ExampleExecutionError(description, e) from e
    logger.debug("Example finished", example=description)
