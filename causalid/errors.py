"""
Errors raised by the causal graph engine.

All of them subclass ValueError: they signal bad arguments (an unknown name,
an edge that would close a cycle) rather than an internal failure, and a
caller has to supply corrected inputs. "No identifiable adjustment set" is not
an error; see IdentificationResult.
"""


class CausalGraphError(ValueError):
    """Base class for every error raised by causalid."""


class UnknownVariableError(CausalGraphError):
    """An operation referenced a name that is not in the graph."""

    def __init__(self, name):
        super().__init__(f"Unknown variable: {name!r}")
        self.name = name


class DuplicateVariableError(CausalGraphError):
    """Graph construction was given a repeated variable name."""

    def __init__(self, name):
        super().__init__(f"Duplicate variable: {name!r}")
        self.name = name


class CycleViolationError(CausalGraphError):
    """Adding an edge would break acyclicity. The graph is left unchanged."""

    def __init__(self, source, target):
        super().__init__(
            f"Edge {source!r} -> {target!r} would create a directed cycle"
        )
        self.source = source
        self.target = target


class OverlappingSetsError(CausalGraphError):
    """Variable sets that must be pairwise disjoint share members."""

    def __init__(self, overlap):
        overlap = sorted(overlap)
        super().__init__(f"Variable sets must be disjoint, shared: {overlap}")
        self.overlap = overlap


class InvalidAdjustmentSetError(CausalGraphError):
    """A proposed adjustment set does not satisfy the backdoor criterion."""
