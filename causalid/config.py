"""
Search configuration for effect identification.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class IdentificationConfig:
    """
    Controls how candidate adjustment and mediator sets are enumerated.

    Attributes:
        max_adjustment_size: Largest candidate set tried when enumerating.
        exhaustive: Ignore `max_adjustment_size` and try every subset.
            Exponential in the number of variables; opt-in only.
        try_frontdoor: Fall back to frontdoor candidates when no backdoor
            set works.
        show_progress: Wrap candidate enumeration in a tqdm progress bar.
    """
    max_adjustment_size: int = 3
    exhaustive: bool = False
    try_frontdoor: bool = True
    show_progress: bool = False

    def __post_init__(self):
        if self.max_adjustment_size < 0:
            raise ValueError(
                f"max_adjustment_size must be >= 0, got {self.max_adjustment_size}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IdentificationConfig":
        """Build from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def size_bound(self, n_candidates: int) -> int:
        """Largest subset size to enumerate from `n_candidates` variables."""
        if self.exhaustive:
            return n_candidates
        return min(self.max_adjustment_size, n_candidates)
