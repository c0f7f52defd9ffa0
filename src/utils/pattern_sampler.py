"""
Pattern Sampler
================
Produces random strings that match a regular expression.

`rstr.xeger` synthesizes a candidate from the pattern; the candidate is then checked
with `re.search` and discarded if it does not match (rejection sampling).
The loop is bounded so an unsatisfiable pattern fails loudly instead of
spinning forever.
"""

import logging
import re
from typing import Optional, Union

import rstr

from core import config
from core.errors import PatternGenerationError

logger = logging.getLogger(config.LOGGER_NAME)


def sample_matching(pattern: Union[str, re.Pattern], max_attempts: Optional[int] = None) -> str:
    """
    Returns a random string for which `re.search(pattern, s)` succeeds.

    Raises PatternGenerationError if the pattern does not compile, if rstr
    cannot expand it, or if `max_attempts` candidates all failed to match.
    """
    if max_attempts is None:
        max_attempts = config.MAX_PATTERN_ATTEMPTS

    source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
    try:
        regex = re.compile(source)
    except re.error as exc:
        raise PatternGenerationError(source, f"invalid regular expression ({exc})") from exc

    for attempt in range(1, max_attempts + 1):
        try:
            candidate = rstr.xeger(source)
        except Exception as exc:
            raise PatternGenerationError(source, f"pattern cannot be expanded ({exc})") from exc

        if regex.search(candidate):
            if attempt > 1:
                logger.debug(f"Pattern {source!r} matched after {attempt} attempts")
            return candidate

    logger.warning(f"⚠️  Gave up on pattern {source!r} after {max_attempts} attempts")
    raise PatternGenerationError(source, f"no matching candidate after {max_attempts} attempts")
