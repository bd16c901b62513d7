"""Tests for termsubst/substitution.py — add/remove/contains/apply."""

import pytest

from termsubst import (
    DuplicateBinding,
    FnApp,
    InvalidArgument,
    Substitution,
    clone_substitution,
    is_equal,
)
from termsubst.helpers import app, const, eq, fn, subst, var

f = fn("f", 1)
g = fn("g", 2)
x, y, z = var("x"), var("y"), var("z")
a, b, c = const("a"), const("b"), const("c")


# ---------------------------------------------------------------------------
# add / remove / contains
# ---------------------------------------------------------------------------


def test_add_appends_in_order() -> None:
    s = Substitution()
    s.add(x, a)
    s.add(y, app(f, x))
    assert s.domain() == (x, y)
    assert s.bindings() == ((x, a), (y, app(f, x)))
    assert len(s) == 2


def test_add_duplicate_fails_and_leaves_substitution_unchanged() -> None:
    s = subst((x, a), (y, b))
    before = str(s)
    with pytest.raises(DuplicateBinding) as excinfo:
        s.add(var("x"), c)
    assert excinfo.value.variable == x
    assert str(s) == before
    assert s.lookup(x) == a


def test_duplicate_binding_is_a_value_error() -> None:
    s = subst((x, a))
    with pytest.raises(ValueError):
        s.add(x, a)


def test_add_validates_arguments() -> None:
    s = Substitution()
    with pytest.raises(InvalidArgument):
        s.add(a, b)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        s.add(x, "a")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        s.add(x, f)  # type: ignore[arg-type]
    assert len(s) == 0


def test_remove() -> None:
    s = subst((x, a), (y, b), (z, c))
    s.remove(y)
    assert str(s) == "{x -> a, z -> c}"
    # Unbound: no-op
    s.remove(y)
    assert str(s) == "{x -> a, z -> c}"
    with pytest.raises(InvalidArgument):
        s.remove(a)  # type: ignore[arg-type]


def test_remove_then_add_again() -> None:
    s = subst((x, a), (y, b))
    s.remove(x)
    s.add(x, c)
    assert str(s) == "{y -> b, x -> c}"


def test_contains() -> None:
    s = subst((x, a))
    assert s.contains(var("x"))
    assert not s.contains(y)
    assert x in s
    assert y not in s
    with pytest.raises(InvalidArgument):
        s.contains(a)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        "x" in s  # noqa: B015


def test_from_pairs_accepts_mapping() -> None:
    s = Substitution.from_pairs({x: a, y: b})
    assert str(s) == "{x -> a, y -> b}"
    with pytest.raises(DuplicateBinding):
        Substitution.from_pairs([(x, a), (x, b)])


def test_subst_helper_with_mapping() -> None:
    s = subst((x, a), bindings={y: b})
    assert str(s) == "{x -> a, y -> b}"


# ---------------------------------------------------------------------------
# apply
# ---------------------------------------------------------------------------


def test_apply_empty_returns_copy() -> None:
    t = app(g, x, app(f, a))
    result = Substitution().apply(t)
    assert is_equal(result, t)
    assert result is not t


def test_apply_replaces_bound_variables() -> None:
    s = subst((x, app(f, a)))
    assert str(s.apply(app(g, x, y))) == "g(f(a),y)"
    assert str(s.apply(x)) == "f(a)"
    assert str(s.apply(y)) == "y"
    assert str(s.apply(c)) == "c"


def test_apply_is_not_iterated() -> None:
    s = subst((x, y), (y, a))
    assert str(s.apply(x)) == "y"
    assert str(s.apply(app(g, x, y))) == "g(y,a)"


def test_apply_returns_fresh_bound_term() -> None:
    bound = app(f, a)
    s = subst((x, bound))
    result = s.apply(x)
    assert result == bound
    assert result is not bound


def test_apply_does_not_mutate() -> None:
    s = subst((x, a))
    t = app(f, x)
    s.apply(t)
    assert str(t) == "f(x)"
    assert str(s) == "{x -> a}"


def test_apply_deep_term() -> None:
    t = x
    for _ in range(200):
        t = app(f, t)
    result = subst((x, a)).apply(t)
    assert str(result) == "f(" * 200 + "a" + ")" * 200


def test_apply_rejects_non_terms() -> None:
    with pytest.raises(InvalidArgument):
        subst((x, a)).apply("x")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        Substitution().apply(None)  # type: ignore[arg-type]


def test_apply_equation() -> None:
    s = subst((x, a))
    e = s.apply_equation(eq(app(f, x), app(g, x, y)))
    assert str(e) == "f(a) = g(a,y)"
    with pytest.raises(InvalidArgument):
        s.apply_equation(x)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------


def test_clone_substitution_is_deep() -> None:
    s = subst((x, app(f, y)))
    copy = clone_substitution(s)
    assert copy is not s
    assert copy.equivalent(s)
    (v, t), = copy
    assert v is not x
    assert isinstance(t, FnApp)
    assert t is not s.lookup(x)
    copy.remove(x)
    assert x in s
    assert str(s.copy()) == str(s)


def test_clone_substitution_rejects_non_substitution() -> None:
    with pytest.raises(InvalidArgument):
        clone_substitution({x: a})  # type: ignore[arg-type]


def test_range_variables_and_idempotence() -> None:
    s = subst((x, app(g, y, z)), (z, app(f, y)))
    assert s.range_variables() == (y, z)
    assert not s.is_idempotent()
    assert subst((x, app(f, y))).is_idempotent()
    assert Substitution().is_idempotent()


def test_equivalent_ignores_order() -> None:
    assert subst((x, a), (y, b)).equivalent(subst((y, b), (x, a)))
    assert not subst((x, a)).equivalent(subst((x, b)))
    assert not subst((x, a)).equivalent(subst((x, a), (y, b)))
    assert not subst((x, a)).equivalent(subst((y, a)))


def test_without_trivial() -> None:
    s = subst((x, x), (y, a), (z, z))
    assert str(s.without_trivial()) == "{y -> a}"
    assert len(s) == 3


def test_repr() -> None:
    assert repr(subst((x, a))) == "Substitution({x -> a})"


def test_subst_helper_with_single_mapping() -> None:
    assert str(subst({x: a, y: b})) == "{x -> a, y -> b}"
    assert str(subst({x: a})) == "{x -> a}"


def test_from_pairs_rejects_malformed_pairs() -> None:
    with pytest.raises(InvalidArgument):
        Substitution.from_pairs([(x,)])  # type: ignore[list-item]
    with pytest.raises(InvalidArgument):
        Substitution.from_pairs([(x, a, b)])  # type: ignore[list-item]
    with pytest.raises(InvalidArgument):
        Substitution.from_pairs([x])  # type: ignore[list-item]
