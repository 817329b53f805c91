import pytest
from hypothesis import given
from hypothesis import strategies as st

from clmm_math.bignum import U1024
from clmm_math.tick_array_bit_map import (
    MAX_TICK_ARRAY_START_INDEX,
    MIN_TICK_ARRAY_START_INDEX,
    check_current_tick_array_is_initialized,
    least_significant_bit,
    most_significant_bit,
    next_initialized_tick_array_start_index,
)
from clmm_math.tick_math import MAX_TICK, MIN_TICK, TickMathError

TICK_SPACING = 10
STEP = 600

EIGEN_WORDS = [
    1,
    0,
    0,
    0,
    0,
    0,
    9223372036854775808,
    16140901064495857665,
    7,
    1,
    0,
    0,
    0,
    0,
    0,
    9223372036854775808,
]


def _walk(start, zero_for_one, steps=5):
    bit_map = U1024.max_value()
    found = []
    index = start
    for _ in range(steps):
        result = next_initialized_tick_array_start_index(
            bit_map, index, TICK_SPACING, zero_for_one
        )
        found.append(result)
        if result is None:
            break
        index = result
    return found


def test_most_and_least_significant_bit():
    assert most_significant_bit(U1024.zero()) is None
    assert least_significant_bit(U1024.zero()) is None
    assert most_significant_bit(U1024.one()) == 1023
    assert least_significant_bit(U1024.one()) == 0
    top = U1024.one() << 1023
    assert most_significant_bit(top) == 0
    assert least_significant_bit(top) == 1023


def test_check_current_tick_array_is_initialized():
    bit_map = U1024.from_words([1] + [0] * 14 + [1 << 63])
    initialized_ticks = []
    for i in range(1024):
        tick = -307200 + STEP * i
        initialized, start = check_current_tick_array_is_initialized(
            bit_map, tick, TICK_SPACING
        )
        assert start == tick
        if initialized:
            initialized_ticks.append(tick)
    assert initialized_ticks == [-307200, 306600]


def test_check_current_rounds_towards_negative_infinity():
    bit_map = U1024.max_value()
    assert check_current_tick_array_is_initialized(bit_map, -1, TICK_SPACING) == (True, -600)
    assert check_current_tick_array_is_initialized(bit_map, 599, TICK_SPACING) == (True, 0)
    assert check_current_tick_array_is_initialized(bit_map, -600, TICK_SPACING) == (True, -600)


def test_check_current_max_tick_is_beyond_bitmap():
    assert check_current_tick_array_is_initialized(
        U1024.max_value(), MAX_TICK, TICK_SPACING
    ) == (False, 307200)


@pytest.mark.parametrize("tick", [MIN_TICK - 1, MAX_TICK + 1])
def test_check_current_rejects_out_of_range_tick(tick):
    with pytest.raises(TickMathError):
        check_current_tick_array_is_initialized(U1024.max_value(), tick, TICK_SPACING)


def test_find_next_positive_price_down():
    assert _walk(306600, True) == [306000, 305400, 304800, 304200, 303600]


def test_find_next_negative_price_down():
    assert _walk(-307200 + 1200, True) == [-306600, -307200, None]


def test_find_next_price_down_cross_zero():
    assert _walk(1600, True) == [600, 0, -600, -1200, -1800]


def test_find_previous_positive_price_up():
    assert _walk(306600 - 1200, False) == [306000, 306600, None]


def test_find_previous_negative_price_up():
    assert _walk(-307200, False) == [-306600, -306000, -305400, -304800, -304200]


def test_find_previous_price_up_cross_zero():
    assert _walk(-1600, False) == [-1200, -600, 0, 600, 1200]


def test_find_next_with_eigenvalues():
    bit_map = U1024.from_words(EIGEN_WORDS)
    down = [
        (0, -600),
        (-600, -1200),
        (-1200, -1800),
        (-1800, -38400),
        (-38400, -39000),
        (-39000, -307200),
    ]
    for start, expected in down:
        assert next_initialized_tick_array_start_index(bit_map, start, TICK_SPACING, True) == expected
    up = [(0, 600), (600, 1200), (1200, 38400), (38400, 306600)]
    for start, expected in up:
        assert next_initialized_tick_array_start_index(bit_map, start, TICK_SPACING, False) == expected


def test_next_initialized_boundary():
    bit_map = U1024.max_value()
    assert next_initialized_tick_array_start_index(
        bit_map, MAX_TICK_ARRAY_START_INDEX, TICK_SPACING, False
    ) is None
    assert next_initialized_tick_array_start_index(
        bit_map, MIN_TICK_ARRAY_START_INDEX, TICK_SPACING, True
    ) is None


@pytest.mark.parametrize(
    "start", [MIN_TICK_ARRAY_START_INDEX - 1, MAX_TICK_ARRAY_START_INDEX + 1]
)
def test_next_initialized_rejects_out_of_range_start(start):
    with pytest.raises(ValueError):
        next_initialized_tick_array_start_index(U1024.max_value(), start, TICK_SPACING, True)


def test_empty_bitmap_has_no_next():
    assert next_initialized_tick_array_start_index(U1024.zero(), 0, TICK_SPACING, True) is None
    assert next_initialized_tick_array_start_index(U1024.zero(), 0, TICK_SPACING, False) is None


@given(st.integers(min_value=MIN_TICK, max_value=MAX_TICK - 1))
def test_check_current_start_contains_tick(tick):
    _, start = check_current_tick_array_is_initialized(U1024.zero(), tick, TICK_SPACING)
    assert start % STEP == 0
    assert start <= tick < start + STEP


@given(st.integers(min_value=0, max_value=1023), st.integers(min_value=0, max_value=1023))
def test_single_bit_search_direction(set_bit, from_bit):
    bit_map = U1024.one() << set_bit
    start = (from_bit - 512) * STEP
    expected_start = (set_bit - 512) * STEP
    down = next_initialized_tick_array_start_index(bit_map, start, TICK_SPACING, True)
    up = next_initialized_tick_array_start_index(bit_map, start, TICK_SPACING, False)
    assert down == (expected_start if set_bit < from_bit else None)
    assert up == (expected_start if set_bit > from_bit else None)