"""Diagnostic checks for terms and substitutions against a Signature.

Unlike the constructors, which raise on malformed input, these checks
collect every problem they find as a Diagnostic and hand back a
CheckResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import assert_never

from .signature import Signature
from .substitution import Substitution
from .terms import Const, FnApp, Term, Var, is_equal, is_term

logger = logging.getLogger(__name__)


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    check: str
    severity: Severity
    message: str
    path: str | None


@dataclass(frozen=True)
class CheckResult:
    subject: str
    diagnostics: tuple[Diagnostic, ...]

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def is_well_formed(self) -> bool:
        return len(self.errors) == 0


@dataclass
class CheckContext:
    sig: Signature
    diagnostics: list[Diagnostic] = field(default_factory=list)
    _const_names: set[str] = field(default_factory=set)
    _nullary_names: set[str] = field(default_factory=set)

    def error(self, check: str, message: str, path: str | None = None) -> None:
        self.diagnostics.append(Diagnostic(check, Severity.ERROR, message, path))

    def warning(self, check: str, message: str, path: str | None = None) -> None:
        self.diagnostics.append(Diagnostic(check, Severity.WARNING, message, path))

    def observe_constant(self, name: str) -> None:
        self._const_names.add(name)

    def observe_nullary(self, name: str) -> None:
        self._nullary_names.add(name)

    def clashing_names(self) -> list[str]:
        return sorted(self._const_names & self._nullary_names)


def _check_term(term: Term, ctx: CheckContext, path: str) -> None:
    match term:
        case Var():
            pass
        case Const(name=name):
            ctx.observe_constant(name)
            if ctx.sig.declares_constants and name not in ctx.sig.constants:
                ctx.error(
                    "constant_declared", f"Constant '{name}' is not declared", path
                )
        case FnApp(symbol=symbol, args=args):
            declared = ctx.sig.get_symbol(symbol.name)
            if declared is None:
                ctx.error(
                    "symbol_declared",
                    f"Function '{symbol.name}' is not declared",
                    path,
                )
            elif declared.arity != symbol.arity:
                ctx.error(
                    "symbol_arity",
                    f"Function '{symbol.name}' is declared with arity {declared.arity}, used with arity {symbol.arity}",
                    path,
                )
            if symbol.arity == 0:
                ctx.observe_nullary(symbol.name)
            for i, arg in enumerate(args):
                _check_term(arg, ctx, f"{path}.args[{i}]")
        case _:
            assert_never(term)


def _check_clashes(ctx: CheckContext) -> None:
    for name in ctx.clashing_names():
        ctx.warning(
            "symbol_constant_clash",
            f"'{name}' is used both as a constant and as a nullary function; both render as '{name}'",
        )


def _finish(subject: str, ctx: CheckContext) -> CheckResult:
    result = CheckResult(subject, tuple(ctx.diagnostics))
    if not result.is_well_formed:
        logger.warning(
            "%s: %d error(s): %s",
            subject,
            len(result.errors),
            [d.check for d in result.errors],
        )
    return result


def check_term(term: Term, sig: Signature) -> CheckResult:
    ctx = CheckContext(sig)
    if not is_term(term):
        ctx.error(  # type: ignore[unreachable]
            "term_shape", f"Expected Term, got {type(term).__name__}", "term"
        )
        return _finish(repr(term), ctx)
    _check_term(term, ctx, "term")
    _check_clashes(ctx)
    return _finish(str(term), ctx)


def check_substitution(subst: Substitution, sig: Signature) -> CheckResult:
    """Check every bound term, then the shape of the substitution itself.

    Trivial bindings (x -> x) and non-idempotent substitutions are reported
    as warnings; both are legal.
    """
    ctx = CheckContext(sig)
    for v, t in subst:
        path = f"subst[{v.name}]"
        _check_term(t, ctx, path)
        if is_equal(v, t):
            ctx.warning(
                "trivial_binding", f"Variable '{v.name}' is bound to itself", path
            )
    _check_clashes(ctx)

    overlap = [v.name for v in subst.range_variables() if subst.contains(v)]
    if overlap:
        ctx.warning(
            "not_idempotent",
            f"Bound variables also occur in bound terms: {', '.join(overlap)}",
        )
    return _finish(str(subst), ctx)
