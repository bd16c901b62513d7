"""termsubst: First-order terms and their substitutions."""

from .errors import (
    DuplicateBinding,
    InternalInvariantViolation,
    InvalidArgument,
    TermError,
)
from .terms import (
    Const,
    Equation,
    FnApp,
    Symbol,
    Term,
    Var,
    apply_args,
    clone_term,
    is_equal,
    is_ground,
    is_term,
    variables,
)
from .render import render_equation, render_substitution, render_term
from .substitution import Substitution, clone_substitution, compose
from .signature import Signature
from .check import CheckResult, Diagnostic, Severity, check_substitution, check_term
from .helpers import app, const, eq, fn, signature, subst, var

__all__ = [
    # Errors
    "DuplicateBinding", "InternalInvariantViolation", "InvalidArgument",
    "TermError",
    # Terms
    "Const", "Equation", "FnApp", "Symbol", "Term", "Var", "apply_args",
    "clone_term", "is_equal", "is_ground", "is_term", "variables",
    # Rendering
    "render_equation", "render_substitution", "render_term",
    # Substitutions
    "Substitution", "clone_substitution", "compose",
    # Signature & checks
    "Signature", "CheckResult", "Diagnostic", "Severity",
    "check_substitution", "check_term",
    # Helpers
    "app", "const", "eq", "fn", "signature", "subst", "var",
]
