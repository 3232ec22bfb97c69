"""
Small textbook graphs with known identification answers.

    unconfounded   X -> Y
    collider       A -> C <- B
    confounded     C -> X, C -> Y, X -> Y
    mediated       X -> M -> Y
    frontdoor      U -> X, U -> Y, X -> M -> Y   (U latent)
    m_bias         A -> X, A -> M, B -> M, B -> Y, X -> Y
"""

from causalid import CausalGraph


def unconfounded(X: str = "X", Y: str = "Y") -> CausalGraph:
    """X -> Y and nothing else; the empty set is a valid adjustment."""
    return CausalGraph.from_edges([X, Y], [(X, Y)])


def collider(A: str = "A", B: str = "B", C: str = "C") -> CausalGraph:
    """A -> C <- B: A ⊥ B, but conditioning on C makes them dependent."""
    return CausalGraph.from_edges([A, B, C], [(A, C), (B, C)])


def confounded(X: str = "X", Y: str = "Y", C: str = "C") -> CausalGraph:
    """C -> X, C -> Y, X -> Y: adjust for C."""
    return CausalGraph.from_edges([C, X, Y], [(C, X), (C, Y), (X, Y)])


def mediated(X: str = "X", M: str = "M", Y: str = "Y") -> CausalGraph:
    """X -> M -> Y with no confounding."""
    return CausalGraph.from_edges([X, M, Y], [(X, M), (M, Y)])


def frontdoor(X: str = "X", M: str = "M", Y: str = "Y", U: str = "U") -> CausalGraph:
    """
    Latent confounder U of X and Y with a fully mediating M. No backdoor set
    exists among observed variables; {M} satisfies the frontdoor criterion.
    """
    return CausalGraph.from_edges(
        [U, X, M, Y],
        [(U, X), (U, Y), (X, M), (M, Y)],
        latent=[U],
    )


def m_bias(X: str = "X", Y: str = "Y", M: str = "M", A: str = "A", B: str = "B") -> CausalGraph:
    """
    M-bias: M is a pre-treatment collider. The empty set is a valid
    adjustment; adjusting for M alone opens X <- A -> M <- B -> Y.
    """
    return CausalGraph.from_edges(
        [A, B, X, M, Y],
        [(A, X), (A, M), (B, M), (B, Y), (X, Y)],
    )
