"""Tests for Option monad implementation.

Validates:
- Variant construction and queries
- Laziness: callbacks never run on the short-circuit path, at most once otherwise
- Unwrap failures and the callback return-type contract
- Nullable round-trips
"""

from __future__ import annotations

import copy

import pytest

from rustify import ContractError, Err, Nothing, NothingUnwrapError, Ok, Option, Some, UnwrapError, from_nullable


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Queries
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [42, "text", 0, "", [], False, None, {"a": 1}])
def test_some_holds_any_value(value: object) -> None:
    opt = Some(value)

    assert opt.is_present()
    assert not opt.is_absent()
    assert opt.unwrap() == value


def test_nothing_construction() -> None:
    opt: Option[int] = Nothing()

    assert opt.is_absent()
    assert not opt.is_present()
    assert Nothing() is Nothing()


def test_immutability() -> None:
    opt = Some(1)

    with pytest.raises(AttributeError):
        opt._value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        opt.extra = 3  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        del opt._value
    assert opt.unwrap() == 1


def test_copy_preserves_variant() -> None:
    assert copy.deepcopy(Some([1, 2])) == Some([1, 2])
    assert copy.copy(Nothing()).is_absent()


# ═════════════════════════════════════════════════════════════════════════════
# Functor Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_map_some() -> None:
    assert Some(5).map(lambda x: x * 2).unwrap() == 10


def test_map_nothing_skips_callback(recorder) -> None:
    f = recorder(returns=99)
    mapped = Nothing().map(f)

    assert mapped.is_absent()
    assert f.count == 0


def test_map_propagates_callback_exception() -> None:
    def boom(_: int) -> int:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        Some(1).map(boom)


def test_map_or_default_is_returned_as_is(recorder) -> None:
    f = recorder(returns="mapped")
    default = object()

    assert Nothing().map_or(default, f) is default
    assert f.count == 0
    assert Some(1).map_or(default, f) == "mapped"
    assert f.calls == [(1,)]


def test_map_or_else_is_lazy(recorder) -> None:
    default_fn = recorder(returns="fallback")

    assert Some(3).map_or_else(default_fn, lambda x: x + 1) == 4
    assert default_fn.count == 0

    assert Nothing().map_or_else(default_fn, lambda x: x + 1) == "fallback"
    assert default_fn.count == 1


def test_filter() -> None:
    assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)
    assert Some(3).filter(lambda x: x % 2 == 0).is_absent()


def test_filter_nothing_skips_predicate(recorder) -> None:
    predicate = recorder(returns=True)

    assert Nothing().filter(predicate).is_absent()
    assert predicate.count == 0


# ═════════════════════════════════════════════════════════════════════════════
# Monad Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_and_then_some_calls_once(recorder) -> None:
    f = recorder(returns=Some("next"))

    assert Some(1).and_then(f) == Some("next")
    assert f.calls == [(1,)]


def test_and_then_can_produce_nothing() -> None:
    assert Some(1).and_then(lambda _: Nothing()).is_absent()


def test_and_then_nothing_short_circuits(recorder) -> None:
    f = recorder(returns=Some("next"))

    assert Nothing().and_then(f).is_absent()
    assert f.count == 0


def test_and_then_rejects_non_option() -> None:
    with pytest.raises(ContractError, match="and_then callback must return an Option, got int"):
        Some(1).and_then(lambda x: x + 1)  # type: ignore[arg-type,return-value]


def test_and_then_rejects_result() -> None:
    with pytest.raises(ContractError):
        Some(1).and_then(lambda x: Ok(x))  # type: ignore[arg-type,return-value]


def test_contract_error_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        Some(1).and_then(lambda x: x)  # type: ignore[arg-type,return-value]


def test_flat_map_alias() -> None:
    f = lambda x: Some(x * 2)  # noqa: E731
    assert Some(5).flat_map(f) == Some(5).and_then(f)


def test_monad_laws() -> None:
    f = lambda x: Some(x + 1)  # noqa: E731
    g = lambda x: Some(x * 2)  # noqa: E731
    m = Some(5)

    assert Some(5).and_then(f) == f(5)
    assert m.and_then(Some) == m
    assert m.and_then(f).and_then(g) == m.and_then(lambda x: f(x).and_then(g))


# ═════════════════════════════════════════════════════════════════════════════
# Fallbacks
# ═════════════════════════════════════════════════════════════════════════════


def test_or_else_value() -> None:
    some, fallback = Some(1), Some(2)

    assert some.or_else_value(fallback) is some
    assert Nothing().or_else_value(fallback) is fallback
    assert Nothing().or_else_value(Nothing()).is_absent()


def test_or_else_some_skips_callback(recorder) -> None:
    f = recorder(returns=Some(2))
    some = Some(1)

    assert some.or_else(f) is some
    assert f.count == 0


def test_or_else_nothing_calls_once(recorder) -> None:
    f = recorder(returns=Some(2))

    assert Nothing().or_else(f) == Some(2)
    assert f.calls == [()]


def test_or_else_rejects_non_option() -> None:
    with pytest.raises(ContractError, match="or_else callback must return an Option"):
        Nothing().or_else(lambda: 5)  # type: ignore[arg-type,return-value]


# ═════════════════════════════════════════════════════════════════════════════
# Value Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_nothing_raises() -> None:
    with pytest.raises(NothingUnwrapError, match=r"Called unwrap\(\) on Nothing"):
        Nothing().unwrap()


def test_unwrap_error_family() -> None:
    with pytest.raises(UnwrapError):
        Nothing().unwrap()
    with pytest.raises(RuntimeError):
        Nothing().unwrap()


def test_unwrap_or() -> None:
    assert Some(5).unwrap_or(10) == 5
    assert Nothing().unwrap_or(10) == 10
    assert Some(0).unwrap_or(10) == 0


def test_unwrap_or_else_laziness(recorder) -> None:
    f = recorder(returns=7)

    assert Some(1).unwrap_or_else(f) == 1
    assert f.count == 0

    assert Nothing().unwrap_or_else(f) == 7
    assert f.count == 1


def test_expect_returns_value() -> None:
    assert Some("v").expect("should be there") == "v"


def test_expect_carries_message() -> None:
    with pytest.raises(NothingUnwrapError) as exc_info:
        Nothing().expect("config key 'port' missing")

    assert str(exc_info.value) == "config key 'port' missing"
    assert exc_info.value.message == "config key 'port' missing"


# ═════════════════════════════════════════════════════════════════════════════
# Side Effects
# ═════════════════════════════════════════════════════════════════════════════


def test_if_present(recorder) -> None:
    f = recorder(returns="ignored")

    assert Some(3).if_present(f) is None
    Nothing().if_present(f)

    assert f.calls == [(3,)]


def test_if_absent(recorder) -> None:
    f = recorder()

    Some(3).if_absent(f)
    Nothing().if_absent(f)

    assert f.calls == [()]


def test_inspect_returns_self(recorder) -> None:
    f = recorder()
    some = Some(3)

    assert some.inspect(f) is some
    assert Nothing().inspect(f).is_absent()
    assert f.calls == [(3,)]


# ═════════════════════════════════════════════════════════════════════════════
# Nullable Bridge
# ═════════════════════════════════════════════════════════════════════════════


def test_from_nullable_none_is_nothing() -> None:
    assert Option.from_nullable(None).is_absent()
    assert from_nullable(None).is_absent()


@pytest.mark.parametrize("value", [0, "", [], False, 0.0, "x", 12])
def test_from_nullable_keeps_falsy_values(value: object) -> None:
    opt = from_nullable(value)

    assert opt.is_present()
    assert opt.to_nullable() == value


def test_to_nullable() -> None:
    assert Nothing().to_nullable() is None
    assert Some(0).to_nullable() == 0


def test_nullable_round_trip() -> None:
    obj = object()

    assert from_nullable(obj).to_nullable() is obj
    assert from_nullable(None).to_nullable() is None


# ═════════════════════════════════════════════════════════════════════════════
# Conversion & Matching
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_or() -> None:
    assert Some(1).ok_or("missing") == Ok(1)
    assert Nothing().ok_or("missing") == Err("missing")


def test_ok_or_else_laziness(recorder) -> None:
    f = recorder(returns="missing")

    assert Some(1).ok_or_else(f) == Ok(1)
    assert f.count == 0
    assert Nothing().ok_or_else(f) == Err("missing")
    assert f.count == 1


def test_match_runs_one_branch(recorder) -> None:
    on_some, on_nothing = recorder(returns="some"), recorder(returns="nothing")

    assert Some(1).match(some=on_some, nothing=on_nothing) == "some"
    assert Nothing().match(some=on_some, nothing=on_nothing) == "nothing"
    assert on_some.calls == [(1,)]
    assert on_nothing.calls == [()]


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_equality() -> None:
    assert Some(42) == Some(42)
    assert Some(42) != Some(43)
    assert Some(None) != Nothing()
    assert Nothing() == Nothing()
    assert Some(1) != Ok(1)


def test_hash() -> None:
    assert hash(Some(1)) == hash(Some(1))
    assert len({Some(1), Some(1), Nothing(), Nothing()}) == 2


def test_absent_flag_discards_payload() -> None:
    stray = Option(5, False)

    assert stray == Nothing()
    assert hash(stray) == hash(Nothing())
    assert repr(stray) == "Nothing"
    assert stray.to_nullable() is None
    assert list(stray) == []


def test_truthiness() -> None:
    assert bool(Some(0)) is True
    assert bool(Nothing()) is False


def test_repr() -> None:
    assert repr(Some("a")) == "Some('a')"
    assert repr(Nothing()) == "Nothing"


def test_iteration() -> None:
    assert list(Some(42)) == [42]
    assert list(Nothing()) == []
