"""Substitutions: finite, ordered mappings from variables to terms.

A substitution σ = {x₁ ↦ t₁, ..., xₙ ↦ tₙ} binds each variable at most once.
Bindings keep their insertion order; the order shows up in rendering only,
lookup is by variable name.

Composition follows Baader & Snyder, "Unification Theory", Handbook of
Automated Reasoning (2001): σ₁σ₂ is the substitution that behaves like
applying σ₁ and then σ₂.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import assert_never

from .errors import DuplicateBinding, InternalInvariantViolation, InvalidArgument
from .render import render_substitution
from .terms import (
    Const,
    Equation,
    FnApp,
    Term,
    Var,
    clone_term,
    is_equal,
    is_term,
    variables,
)

logger = logging.getLogger(__name__)


def _require_var(variable: object) -> Var:
    if not isinstance(variable, Var):
        raise InvalidArgument(f"Expected a Var, got {type(variable).__name__}")
    return variable


def _require_term(term: object) -> Term:
    if not is_term(term):
        raise InvalidArgument(f"Expected a Term, got {type(term).__name__}")
    return term  # type: ignore[return-value]


class Substitution:
    """A mutable, insertion-ordered set of variable bindings.

    Example:
        σ = Substitution()
        σ.add(Var("x"), app(g, Var("y"), Const("c")))
        str(σ)  # "{x -> g(y,c)}"

    Only ``add`` and ``remove`` mutate; ``apply`` and ``compose`` always
    return fresh values.
    """

    def __init__(self) -> None:
        self._bindings: dict[Var, Term] = {}

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[Var, Term]] | Mapping[Var, Term]
    ) -> Substitution:
        """Build a substitution by ``add``-ing each pair in order."""
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        sub = cls()
        for pair in items:
            if not isinstance(pair, tuple) or len(pair) != 2:
                raise InvalidArgument(
                    f"Expected a (Var, Term) pair, got {type(pair).__name__}"
                )
            sub.add(*pair)
        return sub

    # -- primitives ---------------------------------------------------------

    def add(self, variable: Var, term: Term) -> None:
        _require_var(variable)
        _require_term(term)
        if variable in self._bindings:
            raise DuplicateBinding(variable)
        self._bindings[variable] = term

    def remove(self, variable: Var) -> None:
        """Drop the binding for ``variable``; unbound variables are ignored."""
        _require_var(variable)
        self._bindings.pop(variable, None)

    def contains(self, variable: Var) -> bool:
        _require_var(variable)
        return variable in self._bindings

    def lookup(self, variable: Var) -> Term | None:
        _require_var(variable)
        return self._bindings.get(variable)

    def apply(self, term: Term) -> Term:
        """Rewrite every bound variable in ``term``.

        Always returns a new tree, even when nothing is bound.
        """
        _require_term(term)
        if not self._bindings:
            return clone_term(term)
        return self._apply(term)

    def _apply(self, term: Term) -> Term:
        match term:
            case FnApp(symbol=symbol, args=args):
                return FnApp(symbol, tuple(self._apply(a) for a in args))
            case Var():
                bound = self._bindings.get(term)
                return clone_term(bound if bound is not None else term)
            case Const():
                return clone_term(term)
            case _:
                assert_never(term)

    def apply_equation(self, equation: Equation) -> Equation:
        if not isinstance(equation, Equation):
            raise InvalidArgument(
                f"Expected an Equation, got {type(equation).__name__}"
            )
        return Equation(self.apply(equation.lhs), self.apply(equation.rhs))

    def compose(self, other: Substitution) -> Substitution:
        return compose(self, other)

    # -- inspection ---------------------------------------------------------

    def copy(self) -> Substitution:
        return clone_substitution(self)

    def bindings(self) -> tuple[tuple[Var, Term], ...]:
        return tuple(self._bindings.items())

    def domain(self) -> tuple[Var, ...]:
        return tuple(self._bindings)

    def range_variables(self) -> tuple[Var, ...]:
        """Variables occurring in bound terms, first-occurrence order."""
        seen: dict[Var, None] = {}
        for t in self._bindings.values():
            for v in variables(t):
                seen.setdefault(v)
        return tuple(seen)

    def is_idempotent(self) -> bool:
        """True iff no bound variable reappears in a bound term (σσ = σ)."""
        return not set(self._bindings).intersection(self.range_variables())

    def equivalent(self, other: Substitution) -> bool:
        """Same bindings as ``other``, ignoring insertion order."""
        if not isinstance(other, Substitution):
            raise InvalidArgument(
                f"Expected a Substitution, got {type(other).__name__}"
            )
        if len(self) != len(other):
            return False
        return all(
            other.contains(v) and is_equal(t, other.lookup(v))
            for v, t in self._bindings.items()
        )

    def without_trivial(self) -> Substitution:
        """Copy of this substitution minus every ``x -> x`` binding."""
        return Substitution.from_pairs(
            (clone_term(v), clone_term(t))  # type: ignore[misc]
            for v, t in self._bindings.items()
            if not is_equal(v, t)
        )

    def __contains__(self, variable: object) -> bool:
        return self.contains(variable)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[tuple[Var, Term]]:
        return iter(self.bindings())

    def __len__(self) -> int:
        return len(self._bindings)

    def __str__(self) -> str:
        return render_substitution(self)

    def __repr__(self) -> str:
        return f"Substitution({render_substitution(self)})"


# ---------------------------------------------------------------------------
# Copying and composition
# ---------------------------------------------------------------------------


def clone_substitution(sub: Substitution) -> Substitution:
    """Deep copy: every variable and every bound term is cloned."""
    if not isinstance(sub, Substitution):
        raise InvalidArgument(f"Expected a Substitution, got {type(sub).__name__}")
    new = Substitution()
    for v, t in sub:
        new.add(Var(v.name), clone_term(t))
    return new


def compose(sigma1: Substitution, sigma2: Substitution) -> Substitution:
    """Compose ``sigma1`` with ``sigma2``: apply ``sigma1`` first, then ``sigma2``.

    For every term t:  compose(σ₁, σ₂).apply(t) == σ₂.apply(σ₁.apply(t))

    Procedure (Baader & Snyder):
      1. σ₁ empty → copy of σ₂.
      2. R = {x ↦ σ₂(t) | x ↦ t ∈ σ₁}
      3. S = copy of σ₂ without the bindings for Dom(σ₁).
      4. Drop trivial bindings x ↦ x from R.
      5. Result is R followed by S.

    Trivial bindings coming from σ₂ itself are kept as they are.
    """
    if not isinstance(sigma1, Substitution):
        raise InvalidArgument(
            f"Expected a Substitution, got {type(sigma1).__name__}"
        )
    if not isinstance(sigma2, Substitution):
        raise InvalidArgument(
            f"Expected a Substitution, got {type(sigma2).__name__}"
        )

    if not len(sigma1):
        return clone_substitution(sigma2)

    rewritten = Substitution()
    for v, t in sigma1:
        rewritten.add(Var(v.name), sigma2.apply(t))
    logger.debug("compose: rewrote left bindings to %s", rewritten)

    right = clone_substitution(sigma2)
    for v in rewritten.domain():
        if right.contains(v):
            logger.debug("compose: %s bound on both sides, keeping left binding", v)
            right.remove(v)

    for v, t in rewritten.bindings():
        if is_equal(v, t):
            logger.debug("compose: dropping trivial binding %s -> %s", v, t)
            rewritten.remove(v)

    for v, t in right:
        try:
            rewritten.add(v, t)
        except DuplicateBinding as e:
            raise InternalInvariantViolation(
                f"compose produced a second binding for '{v.name}'"
            ) from e

    logger.debug("compose: %s . %s = %s", sigma1, sigma2, rewritten)
    return rewritten
