"""Read-only view of the line editor state for a single highlight call."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum


class RegionType(Enum):
    NONE = "none"
    CHAR = "char"
    LINE = "line"
    PASTE = "paste"


@dataclass(frozen=True)
class PathConventions:
    """Platform path rules used when splitting arguments into segments."""

    separator: str = "/"
    drive_letters: bool = False

    @classmethod
    def native(cls) -> PathConventions:
        return cls(separator=os.sep, drive_letters=os.name == "nt")


@dataclass(frozen=True)
class EditorSnapshot:
    """Editor state consulted by the dispatcher; never outlives one call."""

    search_term: str | None = None
    region: RegionType = RegionType.NONE
    region_range: tuple[int, int] | None = None
    error_index: int = -1
    error_pattern: re.Pattern[str] | None = None
    use_forward_slash: bool = False
    conventions: PathConventions = field(default_factory=PathConventions)

    @property
    def separator(self) -> str:
        return "/" if self.use_forward_slash else self.conventions.separator

    def wants_default_highlight(self) -> bool:
        """True while searching, selecting or showing an error marker."""

        return (
            bool(self.search_term)
            or self.region is not RegionType.NONE
            or self.error_index > -1
            or self.error_pattern is not None
        )
