"""MTOM multipart attachment parsing.

This is a lenient scraper, not a MIME parser: it never raises on odd
input, and fields it cannot locate stay ``None``.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from ..utils.headers import get_header
from .models import Attachment

logger = logging.getLogger(__name__)

BOUNDARY_PATTERN = re.compile(r'boundary="?([^";\s]*)"?\s*(?:;|$)', re.IGNORECASE)

XOP_INCLUDE_PATTERN = re.compile(
    r'<xop:Include\b[^>]*?\shref="cid:([\w@.-]*)"[^>]*?(?:/>|>\s*</xop:Include>)',
    re.IGNORECASE,
)

CONTENT_ID_PATTERN = re.compile(
    r"^Content-Id:\s*<([\w/.@-]*)>\r?$", re.IGNORECASE | re.MULTILINE
)

CONTENT_TYPE_PATTERN = re.compile(
    r"^Content-Type:\s*([\w/+.-]+)", re.IGNORECASE | re.MULTILINE
)

# Expected part layout after splitting on the boundary:
#   0: rest of the boundary line
#   1: Content-Type
#   2: Content-Id
#   3: blank separator
#   4: payload (5 when an extra header line pushes the blank down)
DATA_LINE_INDEX = 4


def find_boundary(headers: Mapping[str, str]) -> Optional[str]:
    """Return the multipart boundary declared in Content-Type, or None."""
    content_type = get_header(headers, "Content-Type")
    if not content_type:
        return None
    match = BOUNDARY_PATTERN.search(content_type)
    if match is None or not match.group(1):
        return None
    return match.group(1)


def find_content_ids(body: str) -> list[str]:
    """Return the distinct cid references in body, in order of appearance."""
    seen: dict[str, None] = {}
    for match in XOP_INCLUDE_PATTERN.finditer(body):
        seen.setdefault(match.group(1), None)
    return list(seen)


def split_parts(body: str, boundary: str) -> list[str]:
    """Split body on the boundary token, dropping the preamble."""
    return body.split(boundary)[1:]


def split_lines(part: str) -> list[str]:
    if "\r\n" in part:
        return part.split("\r\n")
    return part.split("\n")


def extract_part_data(part: str) -> Optional[str]:
    """Pick the payload line of a part by its position.

    Takes line 4, or line 5 when line 4 is empty. Returns None when the
    part is too short to hold a payload at either position.
    """
    lines = split_lines(part)
    index = DATA_LINE_INDEX
    if index < len(lines) and lines[index] == "":
        index += 1
    if index >= len(lines):
        return None
    return lines[index]


def parse_attachments(headers: Mapping[str, str], body: str) -> dict[str, Attachment]:
    """Map content ids referenced in the envelope to their multipart parts.

    Args:
        headers: Response headers (Content-Type carries the boundary)
        body: Text response body

    Returns:
        Dict of content id -> Attachment. Empty when the response has no
        boundary or no xop:Include references. Referenced ids that match no
        part keep mime and data set to None.
    """
    boundary = find_boundary(headers)
    if boundary is None:
        return {}

    content_ids = find_content_ids(body)
    if not content_ids:
        return {}

    attachments = {cid: Attachment(content_id=cid) for cid in content_ids}

    for part in split_parts(body, boundary):
        id_match = CONTENT_ID_PATTERN.search(part)
        if id_match is None:
            continue
        attachment = attachments.get(id_match.group(1))
        if attachment is None:
            continue

        type_match = CONTENT_TYPE_PATTERN.search(part)
        if type_match is not None:
            attachment.mime = type_match.group(1)
        attachment.data = extract_part_data(part)

    logger.debug(
        "Found %d attachment reference(s), %d matched a part",
        len(attachments),
        sum(1 for a in attachments.values() if a.data is not None),
    )
    return attachments
