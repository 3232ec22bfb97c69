"""
Identification Criteria: can P(Y | do(X)) be computed from observational data?

Backdoor criterion (Pearl 2009, Def. 3.3.1):

    Z is admissible for (X, Y) iff
        (a) no member of Z is a descendant of X, and
        (b) Z d-separates X from Y in G with every edge out of X removed.

    Then P(y | do(x)) = Σ_z P(y | x, z) P(z).

Frontdoor criterion (Pearl 2009, Def. 3.3.3):

    M is admissible for (X, Y) iff
        (a) M intercepts every directed path X -> ... -> Y,
        (b) there is no unblocked backdoor path from X to M, and
        (c) every backdoor path from M to Y is blocked by X.

    Then P(y | do(x)) = Σ_m P(m | x) Σ_x' P(y | m, x') P(x').

Both are decided with the full d-separation engine, so colliders on a path
are handled exactly rather than by an undirected reachability heuristic.

Search:

    identify_effect tries backdoor candidates smallest first (smaller
    adjustment sets give more efficient estimators), then frontdoor
    candidates, and otherwise reports UNIDENTIFIABLE as a normal result.
"""

import itertools
import logging
import math
from contextlib import closing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Sequence

from tqdm import tqdm

from causalid.causal_graph import CausalGraph
from causalid.config import IdentificationConfig
from causalid.d_separation import check_disjoint, d_separated
from causalid.errors import InvalidAdjustmentSetError
from causalid.reachability import ancestors, descendants, has_directed_path

logger = logging.getLogger(__name__)


class IdentificationStrategy(str, Enum):
    BACKDOOR = "backdoor"
    FRONTDOOR = "frontdoor"
    UNIDENTIFIABLE = "unidentifiable"


@dataclass(frozen=True)
class IdentificationResult:
    """Outcome of identify_effect."""
    strategy: IdentificationStrategy
    treatment: FrozenSet[str]
    outcome: FrozenSet[str]
    adjustment_set: FrozenSet[str] = frozenset()  # mediators for FRONTDOOR

    @property
    def identifiable(self) -> bool:
        return self.strategy is not IdentificationStrategy.UNIDENTIFIABLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "identifiable": self.identifiable,
            "treatment": sorted(self.treatment),
            "outcome": sorted(self.outcome),
            "adjustment_set": sorted(self.adjustment_set),
        }


def _descendants_of_all(g: CausalGraph, nodes: Iterable[str]) -> FrozenSet[str]:
    found = set()
    for v in nodes:
        found |= descendants(g, v)
    return frozenset(found)


# ----------------------------------------------------------------------
# Criteria
# ----------------------------------------------------------------------


def backdoor_criterion(g: CausalGraph, X, Y, Z=()) -> bool:
    """
    Check whether Z satisfies the backdoor criterion relative to (X, Y).

    Args:
        g: Causal graph.
        X: Treatment variable(s).
        Y: Outcome variable(s).
        Z: Proposed adjustment set.

    Raises:
        UnknownVariableError: If any name is absent from g.
        OverlappingSetsError: If X, Y and Z are not pairwise disjoint.
    """
    xs, ys, zs = g.resolve(X), g.resolve(Y), g.resolve(Z)
    check_disjoint(xs, ys, zs)

    offending = zs & _descendants_of_all(g, xs)
    if offending:
        logger.debug("Backdoor: %s contains descendants of %s: %s",
                     sorted(zs), sorted(xs), sorted(offending))
        return False

    return d_separated(g.remove_outgoing_edges(xs), xs, ys, zs)


def frontdoor_criterion(g: CausalGraph, X, Y, M) -> bool:
    """
    Check whether the mediator set M satisfies the frontdoor criterion
    relative to (X, Y). An empty M never does.

    Raises:
        UnknownVariableError: If any name is absent from g.
        OverlappingSetsError: If X, Y and M are not pairwise disjoint.
    """
    xs, ys, ms = g.resolve(X), g.resolve(Y), g.resolve(M)
    check_disjoint(xs, ys, ms)
    if not ms:
        return False

    # (a) every directed X -> Y path passes through M
    for x, y in itertools.product(xs, ys):
        if has_directed_path(g, x, y, avoiding=ms):
            logger.debug("Frontdoor: directed path %s -> %s avoids %s", x, y, sorted(ms))
            return False

    # (b) no open backdoor path X <- ... -> M
    if not backdoor_criterion(g, xs, ms, ()):
        logger.debug("Frontdoor: open backdoor path from %s to %s", sorted(xs), sorted(ms))
        return False

    # (c) X blocks every backdoor path M <- ... -> Y
    if not backdoor_criterion(g, ms, ys, xs):
        logger.debug("Frontdoor: %s does not block backdoor paths from %s to %s",
                     sorted(xs), sorted(ms), sorted(ys))
        return False

    return True


def adjustment_formula(g: CausalGraph, X, Y, Z) -> FrozenSet[str]:
    """
    Validate Z as the adjustment set for P(Y | do(X)) = Σ_z P(Y | X, z) P(z).

    Returns:
        Z as a frozenset, ready to hand to an effect estimator.

    Raises:
        InvalidAdjustmentSetError: If Z fails the backdoor criterion.
    """
    zs = g.resolve(Z)
    if not backdoor_criterion(g, X, Y, zs):
        raise InvalidAdjustmentSetError(
            f"{sorted(zs)} does not satisfy the backdoor criterion "
            f"for {sorted(g.resolve(X))} -> {sorted(g.resolve(Y))}"
        )
    return zs


# ----------------------------------------------------------------------
# Candidate enumeration
# ----------------------------------------------------------------------


def _subsets(
    pool: Sequence[str],
    min_size: int,
    max_size: int,
    show_progress: bool,
    desc: str,
) -> Iterator[FrozenSet[str]]:
    """Subsets of `pool` by increasing size, in pool order within a size."""
    sizes = range(min_size, max_size + 1)
    combos = itertools.chain.from_iterable(
        itertools.combinations(pool, k) for k in sizes
    )
    if not show_progress:
        for combo in combos:
            yield frozenset(combo)
        return

    total = sum(math.comb(len(pool), k) for k in sizes)
    bar = tqdm(combos, total=total, desc=desc, leave=False)
    try:
        for combo in bar:
            yield frozenset(combo)
    finally:
        bar.close()


def candidate_adjustment_sets(
    g: CausalGraph,
    X,
    Y,
    config: Optional[IdentificationConfig] = None,
) -> Iterator[FrozenSet[str]]:
    """
    Enumerate backdoor candidates: subsets of observed non-descendants of X
    (excluding X and Y), smallest first, starting with the empty set.
    """
    config = config or IdentificationConfig()
    xs, ys = g.resolve(X), g.resolve(Y)
    excluded = xs | ys | g.latent | _descendants_of_all(g, xs)
    pool = [v for v in g.variables if v not in excluded]
    return _subsets(pool, 0, config.size_bound(len(pool)),
                    config.show_progress, "backdoor candidates")


def candidate_mediator_sets(
    g: CausalGraph,
    X,
    Y,
    config: Optional[IdentificationConfig] = None,
) -> Iterator[FrozenSet[str]]:
    """
    Enumerate frontdoor candidates: non-empty subsets of observed variables
    lying on a directed path from X to Y, smallest first.
    """
    config = config or IdentificationConfig()
    xs, ys = g.resolve(X), g.resolve(Y)
    downstream = _descendants_of_all(g, xs)
    upstream = set()
    for y in ys:
        upstream |= ancestors(g, y)
    on_path = (downstream & upstream) - xs - ys - g.latent
    pool = [v for v in g.variables if v in on_path]
    return _subsets(pool, 1, config.size_bound(len(pool)),
                    config.show_progress, "frontdoor candidates")


def _by_size(g: CausalGraph, candidates: Iterable) -> Iterator[FrozenSet[str]]:
    yield from sorted((g.resolve(c) for c in candidates), key=len)


def _admissible(g: CausalGraph, candidate: FrozenSet[str], reserved: FrozenSet[str]) -> bool:
    if candidate & reserved:
        logger.debug("Skipping %s: overlaps treatment/outcome", sorted(candidate))
        return False
    if candidate & g.latent:
        logger.debug("Skipping %s: contains latent variables", sorted(candidate))
        return False
    return True


# ----------------------------------------------------------------------
# Search
# ----------------------------------------------------------------------


def identify_effect(
    g: CausalGraph,
    X,
    Y,
    candidate_sets: Optional[Iterable] = None,
    frontdoor_candidates: Optional[Iterable] = None,
    config: Optional[IdentificationConfig] = None,
) -> IdentificationResult:
    """
    Decide whether P(Y | do(X)) is identifiable and how.

    Args:
        g: Causal graph.
        X: Treatment variable(s).
        Y: Outcome variable(s).
        candidate_sets: Backdoor adjustment sets to try. If None they are
            enumerated from observed non-descendants of X, bounded by
            config.max_adjustment_size.
        frontdoor_candidates: Mediator sets to try. If None they are
            enumerated from observed variables on directed X -> Y paths.
        config: Search configuration.

    Returns:
        IdentificationResult. Supplied candidates are tried by increasing
        size; ones overlapping X or Y or containing latent variables are
        skipped. No valid set gives strategy UNIDENTIFIABLE.

    Raises:
        UnknownVariableError: If X, Y or a supplied candidate names an
            absent variable.
        OverlappingSetsError: If X and Y intersect.
    """
    config = config or IdentificationConfig()
    xs, ys = g.resolve(X), g.resolve(Y)
    check_disjoint(xs, ys)
    reserved = xs | ys

    if candidate_sets is None:
        backdoor_sets = candidate_adjustment_sets(g, xs, ys, config)
    else:
        backdoor_sets = _by_size(g, candidate_sets)

    with closing(backdoor_sets):
        for z in backdoor_sets:
            if _admissible(g, z, reserved) and backdoor_criterion(g, xs, ys, z):
                logger.debug("Identified %s -> %s by backdoor adjustment on %s",
                             sorted(xs), sorted(ys), sorted(z))
                return IdentificationResult(IdentificationStrategy.BACKDOOR, xs, ys, z)

    if config.try_frontdoor:
        if frontdoor_candidates is None:
            mediator_sets = candidate_mediator_sets(g, xs, ys, config)
        else:
            mediator_sets = _by_size(g, frontdoor_candidates)

        with closing(mediator_sets):
            for m in mediator_sets:
                if _admissible(g, m, reserved) and frontdoor_criterion(g, xs, ys, m):
                    logger.debug("Identified %s -> %s by frontdoor mediators %s",
                                 sorted(xs), sorted(ys), sorted(m))
                    return IdentificationResult(IdentificationStrategy.FRONTDOOR, xs, ys, m)

    logger.debug("No admissible set found for %s -> %s", sorted(xs), sorted(ys))
    return IdentificationResult(IdentificationStrategy.UNIDENTIFIABLE, xs, ys)
