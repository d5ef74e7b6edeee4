import pytest


def test_propagate_result_returns_the_first_error() -> None:
    from tagcodec.utils.result import Err, Ok, Result, propagate_result

    calls = []

    def step(value: int) -> Result[int, ValueError]:
        calls.append(value)
        if value < 0:
            return Err(ValueError(f'negative: {value}'))
        return Ok(value)

    @propagate_result
    def total(values: list[int]) -> Result[int, ValueError]:
        return Ok(sum(step(value).unwrap_or_propagate() for value in values))

    assert total([1, 2, 3]) == Ok(6)
    calls.clear()
    error = total([1, -2, -3]).unwrap_err()
    assert str(error) == 'negative: -2'
    assert calls == [1, -2]


def test_unwrap_or_propagate_requires_the_decorator() -> None:
    from tagcodec.utils.result import Err
    with pytest.raises(Exception, match='propagate_result'):
        Err(ValueError('bad')).unwrap_or_propagate()


def test_unwrap_or_raise() -> None:
    from tagcodec.utils.result import Err, Ok
    assert Ok(1).unwrap_or_raise() == 1
    with pytest.raises(ValueError, match='bad'):
        Err(ValueError('bad')).unwrap_or_raise()


def test_combinators() -> None:
    from tagcodec.utils.result import Err, Ok, UnwrapError
    assert Ok(1).map(lambda x: x + 1) == Ok(2)
    assert Ok(1).and_then(lambda x: Err(str(x))) == Err('1')
    assert Err('bad').map(lambda x: x + 1) == Err('bad')
    assert Err('bad').map_err(str.upper) == Err('BAD')
    assert Err('bad').unwrap_or(0) == 0
    with pytest.raises(UnwrapError):
        Err('bad').unwrap()
    with pytest.raises(UnwrapError):
        Ok(1).unwrap_err()


def test_err_keeps_the_cause() -> None:
    from tagcodec.utils.result import Err
    try:
        int('x')
    except ValueError as e:
        err = Err(RuntimeError('wrapped'), cause=e)
    assert err.unwrap_err().__cause__ is not None
    assert err.traceback is not None and 'ValueError' in err.traceback


def test_as_result() -> None:
    from tagcodec.utils.result import Ok, as_result

    @as_result(ValueError)
    def parse(raw: str) -> int:
        return int(raw)

    assert parse('1') == Ok(1)
    assert isinstance(parse('x').unwrap_err(), ValueError)
