# topmark:header:start
#
#   project      : Author Intrusion
#   file         : frontmatter.py
#   file_relpath : src/intrusion/model/frontmatter.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Split a document into its frontmatter block and its body.

A frontmatter block exists when the first line is the boundary marker and a
second marker line follows. The lines strictly between the two markers form
the metadata text; everything after the closing marker is the body.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from intrusion.config.logging import get_logger, run_context
from intrusion.constants import FRONTMATTER_MARKER

if TYPE_CHECKING:
    from intrusion.config.logging import IntrusionLogger
    from intrusion.model.content import Content

logger: IntrusionLogger = get_logger(__name__)


@dataclass(frozen=True)
class Frontmatter:
    """Result of splitting a content into metadata and body text.

    Attributes:
        present (bool): Whether a complete frontmatter block was found.
        text (str): Lines between the two markers; ``""`` when absent.
        body (str): Lines after the closing marker, or the whole document.
        body_start (int): Line index where the body begins.
    """

    present: bool
    text: str
    body: str
    body_start: int


def split_frontmatter(content: Content, marker: str = FRONTMATTER_MARKER) -> Frontmatter:
    """Locate a leading frontmatter block in ``content``.

    Args:
        content (Content): The content to split.
        marker (str): Boundary line text.

    Returns:
        Frontmatter: The metadata and body text of the document.
    """
    end_of_document: int = len(content.lines)

    if content.index_of_text(marker, 0) == 0:
        closing: int = content.index_of_text(marker, 1)
        if closing != -1:
            logger.trace("Frontmatter on lines 0..%d", closing, extra=run_context(content.path))
            return Frontmatter(
                present=True,
                text=content.get_text(1, closing),
                body=content.get_text(closing + 1, end_of_document),
                body_start=closing + 1,
            )
        logger.debug(
            "Opening frontmatter marker without a closing marker",
            extra=run_context(content.path),
        )

    return Frontmatter(
        present=False,
        text="",
        body=content.get_text(0, end_of_document),
        body_start=0,
    )
