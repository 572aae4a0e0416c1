from __future__ import annotations

from dataclasses import dataclass, field

from .fuzzy import RankedMatch


@dataclass
class LauncherState:
    query: str = ""
    matches: list[RankedMatch] = field(default_factory=list)
    ranked_query: str | None = None
    ranked_revision: int = -1
    discovery_complete: bool = False
    dirty: bool = True
