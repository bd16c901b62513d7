"""Builder helpers for constructing terms and substitutions.

These are the primary public API for writing terms by hand; they are thin
wrappers over the dataclass constructors and raise the same errors.
"""

from collections.abc import Iterable, Mapping

from termsubst.signature import Signature
from termsubst.substitution import Substitution
from termsubst.terms import Const, Equation, FnApp, Symbol, Term, Var, apply_args


def var(name: str) -> Var:
    return Var(name)


def const(name: str) -> Const:
    return Const(name)


def fn(name: str, arity: int) -> Symbol:
    return Symbol(name, arity)


def app(symbol: Symbol, *args: Term) -> FnApp:
    return apply_args(symbol, args)


def eq(lhs: Term, rhs: Term) -> Equation:
    return Equation(lhs=lhs, rhs=rhs)


def subst(
    *pairs: tuple[Var, Term] | Mapping[Var, Term],
    bindings: Mapping[Var, Term] | None = None,
) -> Substitution:
    """subst((x, a), (y, f(x)))  →  {x -> a, y -> f(x)}

    A single mapping is also accepted: subst({x: a, y: f(x)}).
    """
    if len(pairs) == 1 and isinstance(pairs[0], Mapping):
        sub = Substitution.from_pairs(pairs[0])
    else:
        sub = Substitution.from_pairs(pairs)  # type: ignore[arg-type]
    for v, t in (bindings or {}).items():
        sub.add(v, t)
    return sub


def signature(*symbols: Symbol, constants: Iterable[str] = ()) -> Signature:
    return Signature(
        symbols={s.name: s for s in symbols},
        constants=frozenset(constants),
    )
