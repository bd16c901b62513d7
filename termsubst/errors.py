"""Exceptions raised by termsubst.

Every failure is synchronous and propagates to the caller. Nothing in the
library catches these; a raised error means the call site is wrong (or, for
InternalInvariantViolation, that composition itself is wrong).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .terms import Var


class TermError(Exception):
    """Base class for all termsubst errors."""


class InvalidArgument(TermError, TypeError):
    """Wrong type or shape passed to a constructor or method.

    Covers non-string names, bad arities, non-Term arguments, non-Var keys,
    and applying a symbol to the wrong number of arguments.
    """


class DuplicateBinding(TermError, ValueError):
    """A substitution already binds the variable passed to ``add``."""

    def __init__(self, variable: Var):
        super().__init__(f"Variable '{variable.name}' is already bound in substitution")
        self.variable = variable


class InternalInvariantViolation(TermError, AssertionError):
    """Composition tried to bind the same variable twice.

    Unreachable from valid inputs; seeing one is a bug in termsubst.
    """
