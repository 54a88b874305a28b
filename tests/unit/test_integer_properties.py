"""
Property-Based Tests for the VM integer core

Tests value construction, bit-width rules and the operation framework
using Hypothesis.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from src.core.integer import (
    Checked,
    IntegerData,
    IntegerOverflow,
    Ordering,
    Quiet,
    binary_op,
    bitsize,
    check_overflow,
    construct_single_nan,
    process_single_result,
    twos_complement,
)

MAX_VALUE = (1 << 256) - 1
MIN_VALUE = -(1 << 256)


# =============================================================================
# HYPOTHESIS STRATEGIES
# =============================================================================

cell_values = st.integers(min_value=MIN_VALUE, max_value=MAX_VALUE)

wide_values = st.integers(min_value=-(1 << 300), max_value=1 << 300)

word_buffers = st.lists(st.integers(min_value=0, max_value=0xFFFFFFFF), min_size=1, max_size=9)


# =============================================================================
# PROPERTIES
# =============================================================================


@settings(max_examples=200)
@given(value=cell_values)
def test_construction_round_trips(value: int) -> None:
    """Любое значение в диапазоне создаётся и возвращается без изменений."""
    data = IntegerData.from_int(value)
    assert not data.is_nan()
    assert data.magnitude == value
    assert data.fits_in(257)


@settings(max_examples=200)
@given(value=wide_values)
def test_check_overflow_matches_bitsize(value: int) -> None:
    assert check_overflow(value) == (bitsize(value) < 258)
    assert check_overflow(value) == (MIN_VALUE <= value <= MAX_VALUE)


@settings(max_examples=200)
@given(value=wide_values)
def test_bitsize_is_minimal_signed_width(value: int) -> None:
    n = bitsize(value)
    assert -(1 << (n - 1)) <= value < (1 << (n - 1))
    if n > 1:
        assert not (-(1 << (n - 2)) <= value < (1 << (n - 2)))


@given(value=cell_values.filter(lambda v: v < 0), bits=st.integers(min_value=0, max_value=1024))
def test_ufits_in_false_for_negative(value: int, bits: int) -> None:
    assert not IntegerData(value).ufits_in(bits)


@given(lhs=cell_values, rhs=cell_values)
def test_cmp_matches_int_ordering(lhs: int, rhs: int) -> None:
    expected = Ordering.LESS if lhs < rhs else Ordering.GREATER if lhs > rhs else Ordering.EQUAL
    assert IntegerData(lhs).cmp(Checked, IntegerData(rhs)) == expected
    assert IntegerData(lhs).partial_cmp(IntegerData(rhs)) == expected


@settings(max_examples=200)
@given(lhs=cell_values, rhs=cell_values)
def test_multiplication_overflow_policy(lhs: int, rhs: int) -> None:
    """Checked бросает ровно тогда, когда Quiet возвращает NaN."""
    product = lhs * rhs

    def mul(behavior):
        return binary_op(
            behavior,
            IntegerData(lhs),
            IntegerData(rhs),
            lambda x, y: x * y,
            construct_single_nan,
            process_single_result,
        )

    quiet = mul(Quiet)
    if check_overflow(product):
        assert quiet.magnitude == product
        assert mul(Checked) == quiet
    else:
        assert quiet.is_nan()
        try:
            mul(Checked)
        except IntegerOverflow:
            pass
        else:
            raise AssertionError("checked multiplication must overflow")


@given(digits=word_buffers)
def test_twos_complement_self_inverse(digits: list[int]) -> None:
    original = list(digits)
    twos_complement(digits)
    twos_complement(digits)
    assert digits == original


@given(digits=word_buffers)
def test_twos_complement_is_negation(digits: list[int]) -> None:
    width = 32 * len(digits)
    value = sum(d << (32 * i) for i, d in enumerate(digits))
    twos_complement(digits)
    negated = sum(d << (32 * i) for i, d in enumerate(digits))
    assert negated == (-value) % (1 << width)


@given(value=cell_values)
def test_withdraw_twice(value: int) -> None:
    slot = IntegerData(value)
    assert slot.withdraw() == IntegerData(value)
    assert slot.withdraw() == IntegerData.zero()
