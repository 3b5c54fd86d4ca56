"""Review options collected from the command line."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ReviewOptions:
    """Options for a single review run.

    List options are None when not given on the command line, which is
    distinct from an empty list for cache identity. Only template, focus
    and ignore take part in the cache key.
    """

    commit: Optional[str] = None
    branch: Optional[str] = None
    last: bool = False
    output: Optional[str] = None
    exclude: Optional[list[str]] = None
    focus: Optional[list[str]] = None
    ignore: Optional[list[str]] = None
    template: Optional[str] = None
    regenerate: bool = False
