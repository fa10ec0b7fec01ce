"""Search runner.

Connects the traversal engine to the filter pipeline for every root
in a SearchConfig.
"""

import logging
from collections.abc import Iterator

from findr.search.config import SearchConfig
from findr.search.filters import entry_matches
from findr.search.models import WalkEntry, WalkObservation
from findr.search.walker import walk

logger = logging.getLogger(__name__)


def find(config: SearchConfig) -> Iterator[WalkObservation]:
    """Search all configured roots, in order.

    Filters only decide what is reported; they never prune the walk.
    Walk errors are always passed through.

    Args:
        config: Validated search configuration.

    Yields:
        Matching WalkEntry values and every WalkError, in traversal order.
    """
    for root in config.paths:
        logger.debug("Searching %s", root)
        for observation in walk(root, max_depth=config.max_depth):
            if not isinstance(observation, WalkEntry):
                yield observation
                continue
            if observation.depth < config.min_depth:
                continue
            if entry_matches(observation, config):
                yield observation
