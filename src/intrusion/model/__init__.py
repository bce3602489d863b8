# topmark:header:start
#
#   project      : Author Intrusion
#   file         : __init__.py
#   file_relpath : src/intrusion/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Author Intrusion contributors
#
# topmark:header:end

"""Document model: locations, tokens and token containers.

Design:
    - A `Content` holds the physical `Line` objects of one file and the
      flattened `Token` sequence of the whole document.
    - Every container (`Content`, `Line`, `Sentence`, `Paragraph`) satisfies
      the `TokenContainer` protocol.
    - `Content.get_scoped_tokens` maps a scope string to the containers an
      analysis inspects.
"""

from __future__ import annotations

from intrusion.model.containers import Line, Paragraph, Sentence, TokenContainer
from intrusion.model.content import Content, ProcessedStages
from intrusion.model.frontmatter import Frontmatter, split_frontmatter
from intrusion.model.location import UNSET, Location
from intrusion.model.scope import DEFAULT_SCOPE, Scope, ScopeResolution
from intrusion.model.token import Token

__all__ = [
    "DEFAULT_SCOPE",
    "UNSET",
    "Content",
    "Frontmatter",
    "Line",
    "Location",
    "Paragraph",
    "ProcessedStages",
    "Scope",
    "ScopeResolution",
    "Sentence",
    "Token",
    "TokenContainer",
    "split_frontmatter",
]
