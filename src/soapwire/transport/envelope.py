"""SOAP envelope extraction from noisy response bodies."""

from __future__ import annotations

import re

# Optional XML declaration, then <prefix:Envelope ...> ... </prefix:Envelope>
# with the closing prefix bound to the opening one.
ENVELOPE_PATTERN = re.compile(
    r"(?:<\?xml[^?]*\?>\s*)?"
    r"<([\w.-]+):Envelope\b[\s\S]*?</\1:Envelope\s*>",
    re.IGNORECASE,
)


def extract_envelope(body: str) -> str:
    """Return the outermost SOAP envelope in body.

    Anything before or after the envelope is discarded. When no envelope is
    found the body is returned unchanged.

    Examples:
        junk<a:Envelope>X</a:Envelope>more -> <a:Envelope>X</a:Envelope>
        no envelope here -> no envelope here
    """
    match = ENVELOPE_PATTERN.search(body)
    if match is None:
        return body
    return match.group(0)


def has_envelope(body: str) -> bool:
    return ENVELOPE_PATTERN.search(body) is not None
