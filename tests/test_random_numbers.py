"""Tests for the random number tool logic."""

import random

import pytest

from core.random_numbers import random_number


def test_within_half_open_range():
    rng = random.Random(7)
    values = {random_number(3, 6, rng) for _ in range(200)}
    assert values == {3, 4, 5}


def test_defaults():
    assert 0 <= random_number() < 100


def test_equal_bounds_return_minimum():
    assert random_number(5, 5) == 5


def test_inverted_bounds_rejected():
    with pytest.raises(ValueError, match="must not be greater"):
        random_number(10, 1)
