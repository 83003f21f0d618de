import dataclasses

import pytest

from fallible import result
from fallible.result import Err, Ok, Result


def spy(fn):
    calls = []

    def wrapped(*args):
        calls.append(args)
        return fn(*args)

    wrapped.calls = calls
    return wrapped


def test_ok_and_err_variants():
    assert Ok(1).is_ok() and not Ok(1).is_err()
    assert Err("boom").is_err() and not Err("boom").is_ok()
    assert result.is_ok(Ok(1))
    assert result.is_err(Err("boom"))


def test_ok_rejects_exceptions():
    with pytest.raises(TypeError):
        Ok(ValueError("bad"))
    with pytest.raises(TypeError):
        Result(True, value=RuntimeError())


def test_ok_accepts_none_and_falsy_values():
    assert Ok().unwrap() is None
    assert Ok(0).unwrap() == 0
    assert Ok("").is_ok()


def test_err_coerces_string_message():
    err = Err("message")
    assert isinstance(err.error, Exception)
    assert str(err.error) == "message"
    assert err == Err(Exception("message"))


def test_err_keeps_exception_instance():
    exc = ValueError("bad")
    assert Err(exc).error is exc


def test_err_rejects_other_types():
    for value in (42, None, ["x"]):
        with pytest.raises(TypeError):
            Err(value)


def test_direct_construction_is_validated():
    with pytest.raises(TypeError):
        Result(True, value=1, error=ValueError())
    with pytest.raises(TypeError):
        Result(False, value=1, error=ValueError())
    assert Result(False, error="x") == Err("x")


def test_results_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Ok(1).value = 2


def test_equality_compares_error_type_and_args():
    assert Err(ValueError("x")) == Err(ValueError("x"))
    assert Err(ValueError("x")) != Err(KeyError("x"))
    assert Err("x") != Err("y")
    assert Ok(1) != Err("1")
    assert len({Err("x"), Err(Exception("x")), Ok(1), Ok(1)}) == 2


def test_err_with_unhashable_args_is_hashable():
    err = Err(ValueError(["x"]))
    assert hash(err) == hash(Err(ValueError(["x"])))
    assert len({err, Err(ValueError(["x"])), Err(ValueError(["y"]))}) == 2


def test_of():
    exc = KeyError("k")
    assert Result.of(exc) == Err(exc)
    assert result.of(exc).error is exc
    assert result.of(3) == Ok(3)
    assert result.of(None) == Ok(None)


def test_map_identity_law():
    for res in (Ok(2), Err("x")):
        assert res.map(lambda v: v) == res


def test_map_composition_law():
    f = lambda v: v + 1
    g = lambda v: v * 3
    for res in (Ok(2), Err("x")):
        assert res.map(f).map(g) == res.map(lambda v: g(f(v)))


def test_map_on_err_never_calls_fn():
    fn = spy(lambda v: v + 1)
    err = Err("x")
    assert err.map(fn) is err
    assert fn.calls == []


def test_map_returning_exception_is_a_contract_violation():
    with pytest.raises(TypeError):
        Ok(1).map(lambda v: ValueError(v))


def test_chain_left_identity():
    f = lambda v: Ok(v * 2) if v > 0 else Err("negative")
    for x in (-1, 4):
        assert Ok(x).chain(f) == f(x)


def test_chain_right_identity():
    for res in (Ok(3), Err("x")):
        assert res.chain(Ok) == res


def test_chain_passes_err_through():
    fn = spy(lambda v: Ok(v))
    err = Err(ValueError("kept"))
    assert err.chain(fn) is err
    assert fn.calls == []


def test_chain_rejects_non_result_callback():
    with pytest.raises(TypeError):
        Ok(1).chain(lambda v: v)


def test_match_calls_exactly_one_branch():
    ok = spy(lambda v: v * 2)
    err = spy(lambda e: str(e))
    assert Ok(5).match(ok=ok, err=err) == 10
    assert Err("bad").match(ok=ok, err=err) == "bad"
    assert len(ok.calls) == 1
    assert len(err.calls) == 1


def test_unwrap_returns_error_without_raising():
    exc = ValueError("bad")
    assert Ok(1).unwrap() == 1
    assert Err(exc).unwrap() is exc
    assert result.unwrap(Err(exc)) is exc


def test_unwrap_or():
    assert Ok(3).unwrap_or(9) == 3
    assert Ok(3).unwrap_or(3) == 3
    assert Err("x").unwrap_or(9) == 9
    assert result.unwrap_or([])(Err("x")) == []


def test_sequence_all_ok():
    assert result.sequence([Ok(1), Ok(2)]) == Ok([1, 2])
    assert Result.sequence([]) == Ok([])


def test_sequence_returns_first_err_unchanged():
    first = Err("x")
    assert result.sequence([Ok(1), first, Err("y")]) is first
    assert result.sequence([Ok(1), Err("x"), Ok(2)]) == Err(Exception("x"))


def test_sequence_stops_at_first_err():
    def results():
        yield Ok(1)
        yield Err("x")
        raise AssertionError("consumed past the first Err")

    assert result.sequence(results()) == Err("x")


def test_traverse():
    double = spy(lambda v: v * 2)
    assert result.traverse(double)([Ok(1), Ok(2)]) == Ok([2, 4])
    assert Result.traverse(double)([Ok(5), Err("x"), Ok(6)]) == Err("x")
    assert double.calls == [(1,), (2,), (5,)]


def test_traverse_keys_off_the_variant():
    # an error-looking payload that is not an exception stays a value
    payloads = [Ok("Error: not really"), Ok({"error": True})]
    assert result.traverse(lambda v: v)(payloads) == Ok(
        ["Error: not really", {"error": True}]
    )


def test_try_success():
    assert result.try_(int)("7") == Ok(7)


def test_try_captures_raised_exception():
    outcome = Result.try_(int)("seven")
    assert outcome.is_err()
    assert isinstance(outcome.error, ValueError)


def test_try_keeps_none_and_falsy_results():
    assert result.try_(lambda: None)() == Ok(None)
    assert result.try_(lambda: 0)() == Ok(0)


def test_try_returned_exception_becomes_err():
    exc = LookupError("missing")
    assert result.try_(lambda: exc)() == Err(exc)


def test_try_does_not_swallow_keyboard_interrupt():
    def interrupt():
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        result.try_(interrupt)()


def test_curried_functions():
    pipeline = [
        result.map(lambda v: v + 1),
        result.chain(lambda v: Ok(v) if v < 10 else Err("too big")),
    ]
    res = Ok(1)
    for step in pipeline:
        res = step(res)
    assert res == Ok(2)
    assert result.match(ok=lambda v: v, err=lambda e: -1)(Err("x")) == -1


def test_repr():
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Err(ValueError("x"))) == "Err(ValueError('x'))"


def test_structural_pattern_matching():
    def describe(res):
        match res:
            case Result(ok=True, value=v):
                return f"value {v}"
            case Result(ok=False, error=e):
                return f"error {e}"

    assert describe(Ok(1)) == "value 1"
    assert describe(Err("bad")) == "error bad"
