import pytest

from padics import PAdicContext


@pytest.fixture
def ctx7():
    return PAdicContext(7)


@pytest.fixture
def ctx3():
    return PAdicContext(3, 10, 12)


@pytest.fixture
def ctx5():
    return PAdicContext(5, 10, 25)


@pytest.fixture
def ctx2():
    return PAdicContext(2, 10, 12)
