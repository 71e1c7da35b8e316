from typing import Optional
from dataclasses import dataclass


@dataclass
class ResolveConfig:
    # Upper bound on the number of reference tokens of any pointer,
    # None means unbounded
    max_depth: Optional[int] = None

    def allows(self, depth: int) -> bool:
        return self.max_depth is None or depth <= self.max_depth


DEFAULT_CONFIG = ResolveConfig()
