import pytest

from padics import (InvalidPowerWindow, InvalidPrime, PAdicContext,
                    PrintMode)


@pytest.mark.parametrize('n', [15, 1, 0, -7, 1023])
def test_non_prime_is_rejected(n):
    with pytest.raises(InvalidPrime):
        PAdicContext(n)


@pytest.mark.parametrize('n', [7.0, '7', True])
def test_prime_must_be_an_integer(n):
    with pytest.raises(TypeError):
        PAdicContext(n)


def test_large_prime_is_accepted():
    ctx = PAdicContext(2**61 - 1)
    assert ctx.prime == 2**61 - 1
    assert ctx.pow(8) == (2**61 - 1)**8


def test_power_table():
    ctx = PAdicContext(7, 2, 4)
    assert (ctx.min, ctx.max) == (2, 4)
    assert [ctx.pow(e) for e in range(2, 5)] == [49, 343, 2401]
    # outside the window
    assert ctx.pow(0) == 1
    assert ctx.pow(10) == 7**10
    with pytest.raises(ValueError):
        ctx.pow(-1)


@pytest.mark.parametrize('lo, hi', [(5, 3), (-1, 3)])
def test_bad_window(lo, hi):
    with pytest.raises(InvalidPowerWindow):
        PAdicContext(7, lo, hi)


def test_print_mode():
    ctx = PAdicContext(7)
    assert ctx.mode is PrintMode.TERSE
    ctx.set_print_mode('series')
    assert ctx.mode is PrintMode.SERIES
    ctx.set_print_mode(PrintMode.VAL_UNIT)
    assert ctx.mode is PrintMode.VAL_UNIT
    with pytest.raises(ValueError):
        ctx.set_print_mode('bogus')


def test_equality_is_by_prime():
    assert PAdicContext(7) == PAdicContext(7, 1, 2)
    assert PAdicContext(7) != PAdicContext(5)
    assert len({PAdicContext(7), PAdicContext(7, 0, 3)}) == 1
    assert repr(PAdicContext(5, 10, 25)) == 'PAdicContext(5, min=10, max=25)'
