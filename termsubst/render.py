"""Textual rendering of terms, equations and substitutions.

Grammar:
    term          ::= name | name "(" term ("," term)* ")"
    equation      ::= term " = " term
    substitution  ::= "{" [binding (", " binding)*] "}"
    binding       ::= name " -> " term

A nullary function application renders as its bare symbol name, so it is
indistinguishable from a constant of the same name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from .terms import Const, Equation, FnApp, Term, Var

if TYPE_CHECKING:
    from .substitution import Substitution


def render_term(t: Term) -> str:
    match t:
        case Var(name=name) | Const(name=name):
            return name
        case FnApp(symbol=symbol, args=()):
            return symbol.name
        case FnApp(symbol=symbol, args=args):
            return f"{symbol.name}({','.join(render_term(a) for a in args)})"
        case _:
            assert_never(t)


def render_equation(e: Equation) -> str:
    return f"{render_term(e.lhs)} = {render_term(e.rhs)}"


def render_substitution(s: Substitution) -> str:
    bindings = ", ".join(f"{render_term(v)} -> {render_term(t)}" for v, t in s)
    return "{" + bindings + "}"
