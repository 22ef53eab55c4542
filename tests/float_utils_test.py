import math
import os
import sys
import warnings

import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
from v2d.FloatUtils import FloatUtils


@pytest.fixture
def no_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield


def test_divide(no_warnings):
    assert FloatUtils.divide(1, 4) == 0.25
    assert FloatUtils.divide(1, 0) == math.inf
    assert FloatUtils.divide(-1, 0) == -math.inf
    assert math.isnan(FloatUtils.divide(0, 0))


def test_divide_returns_builtin_float():
    assert type(FloatUtils.divide(3, 2)) is float


def test_fmod_sign_follows_dividend(no_warnings):
    assert FloatUtils.fmod(5, 3) == 2
    assert FloatUtils.fmod(-5, 3) == -2
    assert FloatUtils.fmod(5, -3) == 2
    assert FloatUtils.fmod(5.5, 2) == 1.5


def test_fmod_special_values(no_warnings):
    assert math.isnan(FloatUtils.fmod(3, 0))
    assert math.isnan(FloatUtils.fmod(math.inf, 2))
    assert FloatUtils.fmod(3, math.inf) == 3


def test_acos(no_warnings):
    assert FloatUtils.acos(1) == 0
    assert FloatUtils.acos(0) == math.pi / 2
    assert FloatUtils.acos(-1) == math.pi


def test_acos_out_of_domain_is_nan(no_warnings):
    assert math.isnan(FloatUtils.acos(1.0000001))
    assert math.isnan(FloatUtils.acos(-2))
    assert math.isnan(FloatUtils.acos(math.nan))
