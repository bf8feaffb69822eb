"""
Constraint encoders lowering named-literal constraints to plain clauses.

Every encoder only calls Formula.add_clause, in a fixed order, so the same
calls always produce the same formula.
"""
from itertools import combinations
from typing import List, Sequence

from sathelper.formula import Formula
from sathelper.literals import Literal, LiteralLike

def _parse_group(group: Sequence[LiteralLike]) -> List[Literal]:
    return [Literal.parse(lit) for lit in group]

def add_at_most_one(formula: Formula, group: Sequence[LiteralLike]) -> int:
    """
    Pairwise encoding: (~a | ~b) for every pair a, b with a before b.
    Emits C(n, 2) binary clauses. All literals false remains allowed.
    Returns the number of clauses added.
    """
    lits = _parse_group(group)
    count = 0
    for a, b in combinations(lits, 2):
        formula.add_clause([~a, ~b])
        count += 1
    return count

def add_exactly_one(formula: Formula, group: Sequence[LiteralLike]) -> int:
    """
    For each literal l_i emits (l_i | ~l_1 | ... | ~l_n) without ~l_i,
    giving n clauses of size n in group order.
    Does NOT force any literal to be true: all-false satisfies every clause.
    Callers needing a strict exactly-one combine add_at_most_one with
    add_at_least_one.
    """
    lits = _parse_group(group)
    for i, lit in enumerate(lits):
        formula.add_clause([lit] + [~other for j, other in enumerate(lits) if j != i])
    return len(lits)

def add_at_least_one(formula: Formula, group: Sequence[LiteralLike]) -> int:
    formula.add_clause(_parse_group(group))
    return 1

def add_implies(formula: Formula, a: LiteralLike, b: LiteralLike) -> int:
    """a -> b, i.e. (~a | b)."""
    formula.add_clause([~Literal.parse(a), Literal.parse(b)])
    return 1
