"""First-order terms.

A term is one of:
  - Variables (placeholders, identified by name)
  - Constants (0-ary atoms, identified by name)
  - Function applications (f(t₁, ..., tₙ) where f is a Symbol of arity n)

Terms are immutable value trees. Every constructor validates its inputs, so
an FnApp always carries exactly ``symbol.arity`` arguments.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, assert_never

from .errors import InvalidArgument

# ---------------------------------------------------------------------------
# Function symbols
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Symbol:
    """A function symbol with a fixed arity.

    Examples:
        a : 0          (nullary, renders like a constant)
        f : 1          f(x)
        g : 2          g(x, y)

    Two symbols are equal iff name and arity both match.
    """

    name: str
    arity: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidArgument(
                f"Symbol name must be a str, got {type(self.name).__name__}"
            )
        if (
            not isinstance(self.arity, int)
            or isinstance(self.arity, bool)
            or self.arity < 0
        ):
            raise InvalidArgument(
                f"Symbol arity must be a non-negative int, got {self.arity!r}"
            )

    @property
    def is_constant(self) -> bool:
        return self.arity == 0

    def apply_args(self, *args: Term) -> FnApp:
        """Build ``self(args...)``."""
        return apply_args(self, args)

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Term AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Var:
    """A variable.

    Example: x
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidArgument(
                f"Variable name must be a str, got {type(self.name).__name__}"
            )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Const:
    """A constant.

    Example: a
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidArgument(
                f"Constant name must be a str, got {type(self.name).__name__}"
            )

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FnApp:
    """Application of a function symbol to arguments.

    Example: f(x)       — FnApp(Symbol("f", 1), (Var("x"),))
    Example: g(x, a)    — FnApp(Symbol("g", 2), (Var("x"), Const("a")))
    Example: e          — FnApp(Symbol("e", 0), ())
    """

    symbol: Symbol
    args: tuple[Term, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, Symbol):
            raise InvalidArgument(
                f"FnApp symbol must be a Symbol, got {type(self.symbol).__name__}"
            )
        if not isinstance(self.args, Sequence) or isinstance(self.args, str):
            raise InvalidArgument(
                f"FnApp args must be a sequence of terms, got {type(self.args).__name__}"
            )
        for i, arg in enumerate(self.args):
            if not is_term(arg):
                raise InvalidArgument(
                    f"Argument {i} to '{self.symbol.name}' must be a Term, got {type(arg).__name__}"
                )
        if len(self.args) != self.symbol.arity:
            raise InvalidArgument(
                f"Function '{self.symbol.name}' expects {self.symbol.arity} arguments, got {len(self.args)}"
            )
        # Frozen, so normalise lists to tuples behind the dataclass's back
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        from .render import render_term

        return render_term(self)


# Union of all term forms
Term = Var | Const | FnApp


def is_term(t: Any) -> bool:
    return isinstance(t, (Var, Const, FnApp))


def apply_args(symbol: Symbol, args: Sequence[Term]) -> FnApp:
    """Apply ``symbol`` to ``args``, checking arity.

    Raises InvalidArgument on a non-Symbol, a non-Term argument, or an
    argument count different from ``symbol.arity``.
    """
    if not isinstance(symbol, Symbol):
        raise InvalidArgument(
            f"Expected a Symbol, got {type(symbol).__name__}"
        )
    return FnApp(symbol, args)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Structural operations
# ---------------------------------------------------------------------------


def is_equal(t1: object, t2: object) -> bool:
    """Structural equality of two terms.

    Total: anything that is not a Term is unequal to everything.
    """
    match t1, t2:
        case Var(name=a), Var(name=b):
            return a == b
        case Const(name=a), Const(name=b):
            return a == b
        case FnApp(symbol=f, args=xs), FnApp(symbol=g, args=ys):
            return (
                f == g
                and len(xs) == len(ys)
                and all(is_equal(x, y) for x, y in zip(xs, ys, strict=True))
            )
        case _:
            return False


def clone_term(t: Term) -> Term:
    """Return a fresh copy of ``t`` sharing no nodes with it."""
    match t:
        case Var(name=name):
            return Var(name)
        case Const(name=name):
            return Const(name)
        case FnApp(symbol=symbol, args=args):
            return FnApp(
                Symbol(symbol.name, symbol.arity),
                tuple(clone_term(a) for a in args),
            )
        case _:
            if not is_term(t):
                raise InvalidArgument(
                    f"Expected a Term, got {type(t).__name__}"
                )
            assert_never(t)


def _walk_vars(t: Term) -> Iterator[Var]:
    match t:
        case Var():
            yield t
        case Const():
            return
        case FnApp(args=args):
            for a in args:
                yield from _walk_vars(a)
        case _:
            assert_never(t)


def variables(t: Term) -> tuple[Var, ...]:
    """Variables occurring in ``t``, in first-occurrence order, no repeats."""
    if not is_term(t):
        raise InvalidArgument(f"Expected a Term, got {type(t).__name__}")
    return tuple(dict.fromkeys(_walk_vars(t)))


def is_ground(t: Term) -> bool:
    return not variables(t)


# ---------------------------------------------------------------------------
# Equations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Equation:
    """An equation between two terms.

    lhs = rhs

    Not evaluated; carried around for display and for applying substitutions
    to both sides at once.

    Example: f(x) = g(x, a)
    """

    lhs: Term
    rhs: Term

    def __post_init__(self) -> None:
        if not is_term(self.lhs):
            raise InvalidArgument(
                f"Equation left side must be a Term, got {type(self.lhs).__name__}"
            )
        if not is_term(self.rhs):
            raise InvalidArgument(
                f"Equation right side must be a Term, got {type(self.rhs).__name__}"
            )

    def __str__(self) -> str:
        from .render import render_equation

        return render_equation(self)
