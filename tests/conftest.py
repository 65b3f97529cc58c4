import pytest

from cas import CAS
from domain import COMPLEX, REAL
from parser import parse


@pytest.fixture
def real():
    return REAL


@pytest.fixture
def cplx():
    return COMPLEX


@pytest.fixture
def cas():
    return CAS()


@pytest.fixture
def cubic():
    """y^3, used by several derivative checks."""
    return parse("y ^ 3")
