import pytest

from taler_amount.domain.monetary.amount import FRACTIONAL_BASE, MAX_AMOUNT_VALUE, Amount
from taler_amount.domain.monetary.amount_errors import (
    AmountError,
    AmountOverflowError,
    AmountUnderflowError,
    CurrencyMismatchError,
)
from tests.helpers.helper_currency import eur

# Constants
A = eur(1, 50000000)
B = eur(23, 70007000)
C = eur(25, 20007000)


# region Construction


def test_constants():
    assert FRACTIONAL_BASE == 10**8
    assert MAX_AMOUNT_VALUE == 2**52


def test_init_keeps_parts():
    amount = Amount("KUDOS", 7, 123)
    assert amount.currency == "KUDOS"
    assert amount.value == 7
    assert amount.fraction == 123


def test_init_default_fraction_is_zero():
    assert Amount("EUR", 5).fraction == 0


@pytest.mark.parametrize(
    "currency, value, fraction",
    [
        ["", 1, 0],
        ["E UR", 1, 50000000],
        ["EUR:X", 1, 50000000],
        ["€", 1, 50000000],
        ["EUR.1", 1, 0],
        ["EUR", -1, 0],
        ["EUR", MAX_AMOUNT_VALUE, 0],
        ["EUR", 1, FRACTIONAL_BASE],
        ["EUR", 1, -1],
        ["EUR", 1.5, 0],
    ],
)
def test_init_rejects_invariant_violations(currency, value, fraction):
    with pytest.raises(ValueError):
        Amount(currency, value, fraction)


def test_init_does_not_normalize_fraction():
    # An overflowing fraction is rejected, never carried into the value
    with pytest.raises(ValueError, match=r"\$fraction"):
        Amount("EUR", 1, FRACTIONAL_BASE + 5)


def test_init_rejects_currency_outside_code_charset():
    # Codes must survive the canonical string round trip
    with pytest.raises(ValueError, match=r"\$currency"):
        Amount("EUR:X", 1, 50000000)


def test_is_zero():
    assert Amount.zero("EUR").is_zero()
    assert Amount("EUR", 0, 0).is_zero()
    assert not Amount("EUR", 0, 1).is_zero()
    assert not Amount("EUR", 1, 0).is_zero()


# endregion

# region Add


def test_add_with_carry():
    result = A.add(B)
    assert result == C
    assert str(result) == "EUR:25.20007"


def test_add_operator():
    assert A + B == C


def test_add_without_carry():
    assert eur(50).add(A) == eur(51, 50000000)


def test_add_fraction_exactly_one_unit():
    assert eur(0, 50000000).add(eur(0, 50000000)) == eur(1, 0)


def test_add_is_commutative():
    assert A.add(B) == B.add(A)


def test_add_does_not_mutate_operands():
    A.add(B)
    assert A == eur(1, 50000000)
    assert B == eur(23, 70007000)


def test_add_currency_mismatch():
    with pytest.raises(CurrencyMismatchError) as exc_info:
        A.add(Amount("KUDOS", 1))
    assert exc_info.value.left is A
    assert isinstance(exc_info.value, AmountError)


def test_add_overflow_at_max_value():
    with pytest.raises(AmountOverflowError) as exc_info:
        Amount("EUR", MAX_AMOUNT_VALUE - 1).add(Amount("EUR", 1))
    assert exc_info.value.value == MAX_AMOUNT_VALUE


def test_add_just_below_max_value():
    result = Amount("EUR", MAX_AMOUNT_VALUE - 2).add(Amount("EUR", 1))
    assert result.value == MAX_AMOUNT_VALUE - 1


def test_add_overflow_from_carry():
    with pytest.raises(AmountOverflowError):
        Amount("EUR", MAX_AMOUNT_VALUE - 1, 60000000).add(Amount("EUR", 0, 40000000))


def test_add_overflow_is_value_error():
    with pytest.raises(ValueError):
        Amount("EUR", MAX_AMOUNT_VALUE - 1) + Amount("EUR", MAX_AMOUNT_VALUE - 1)


def test_add_non_amount_is_not_supported():
    with pytest.raises(TypeError):
        A + 1


# endregion

# region Sub


def test_sub_with_borrow():
    result = C.sub(B)
    assert result == A
    assert str(result) == "EUR:1.5"


def test_sub_operator():
    assert C - B == A


def test_sub_to_zero():
    assert A.sub(A).is_zero()


def test_sub_inverts_add():
    assert A.add(B).sub(B) == A
    assert A.add(B).sub(A) == B


def test_sub_underflow_by_value():
    with pytest.raises(AmountUnderflowError):
        A.sub(B)


def test_sub_underflow_when_borrowing_from_zero():
    with pytest.raises(AmountUnderflowError):
        eur(0, 10).sub(eur(0, 20))


def test_sub_underflow_same_value_larger_fraction():
    with pytest.raises(AmountUnderflowError):
        eur(5, 10).sub(eur(5, 20))


def test_sub_currency_mismatch():
    with pytest.raises(CurrencyMismatchError):
        C.sub(Amount("KUDOS", 1))


def test_sum():
    assert Amount.sum([A, B], "EUR") == C
    assert Amount.sum([], "EUR") == Amount.zero("EUR")


def test_sum_currency_mismatch():
    with pytest.raises(CurrencyMismatchError):
        Amount.sum([A, Amount("KUDOS", 1)], "EUR")


# endregion

# region Comparison


def test_ordering_by_value_then_fraction():
    assert A < B < C
    assert C > B
    assert eur(1, 10) < eur(1, 20)
    assert eur(1, 20) >= eur(1, 20)
    assert eur(1, 20) <= eur(1, 20)


def test_ordering_by_currency_first():
    assert Amount("EUR", 100) < Amount("KUDOS", 1)
    assert sorted([Amount("KUDOS", 1), eur(5), eur(2)]) == [eur(2), eur(5), Amount("KUDOS", 1)]


def test_compare():
    assert A.compare(B) == -1
    assert B.compare(A) == 1
    assert A.compare(eur(1, 50000000)) == 0


def test_equality_and_hash():
    assert eur(1, 5) == eur(1, 5)
    assert eur(1, 5) != eur(1, 6)
    assert Amount("EUR", 1) != Amount("eur", 1)
    assert eur(1, 5) != "EUR:1.00000005"
    assert len({eur(1, 5), eur(1, 5), eur(2)}) == 2


def test_repr():
    assert repr(C) == "Amount('EUR', 25, 20007000)"


# endregion
