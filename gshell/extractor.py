import re
from typing import Tuple

FENCE = "```"

# Opening fence with an optional language tag, e.g. ```bash
_OPENING_FENCE = re.compile(r"```(?:[\w+-]*[ \t]*\n)?")


def extract_script_and_info(raw: str) -> Tuple[str, str]:
    """
    Splits a model response into the runnable script and its explanation.

    The first fenced code block holds the script and whatever follows it is the
    explanation. A response without any fence is taken as a bare command.

    Args:
        raw: The full response text.

    Returns:
        A tuple of (script, info). Either part may be empty.
    """
    if not raw:
        return "", ""

    opening = _OPENING_FENCE.search(raw)
    if not opening:
        return raw.strip(), ""

    body_start = opening.end()
    closing = raw.find(FENCE, body_start)
    if closing == -1:
        # The model stopped before closing the block.
        return raw[body_start:].strip(), ""

    script = raw[body_start:closing].strip()
    info = raw[closing + len(FENCE):].strip()
    return script, info
