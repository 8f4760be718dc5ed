import pytest

from labstructs.complex import Complex

C1 = Complex(1, 2)
C2 = Complex(3, -1)
REAL = 2.0


def test_default_is_zero():
    assert Complex() == Complex(0, 0)
    assert Complex(5) == Complex(5, 0)


def test_addition():
    assert C1 + C2 == Complex(4, 1)
    assert C1 + REAL == Complex(3, 2)
    assert REAL + C2 == Complex(5, -1)


def test_subtraction():
    assert C1 - C2 == Complex(-2, 3)
    assert C1 - REAL == Complex(-1, 2)
    assert REAL - C2 == Complex(-1, 1)


def test_multiplication():
    assert C1 * C2 == Complex(5, 5)
    assert C1 * REAL == Complex(2, 4)
    assert REAL * C2 == Complex(6, -2)


def test_division():
    assert C1 / REAL == Complex(0.5, 1)
    assert C2 / REAL == Complex(1.5, -0.5)
    assert Complex(1, 2) / Complex(1, 1) == Complex(1.5, 0.5)
    assert 2 / Complex(1, 1) == Complex(1, -1)


def test_division_round_trip():
    assert (C2 / C1) * C1 == C2


@pytest.mark.parametrize("divisor", [Complex(), 0, 0.0])
def test_division_by_zero_raises(divisor):
    dividend = Complex(1, 2)
    with pytest.raises(ZeroDivisionError):
        dividend / divisor
    assert dividend == Complex(1, 2)
    assert dividend / Complex(1, 1) == Complex(1.5, 0.5)


def test_equality():
    assert (C1 == C2) is False
    assert (C1 != C2) is True
    assert Complex(2, 0) == 2
    assert 2 == Complex(2, 0)
    assert Complex(2, 1) != 2


def test_equality_tolerance():
    assert Complex(0.1 + 0.2, 0) == Complex(0.3, 0)
    assert Complex(1e-10, 0) != Complex()


def test_negation_and_conjugate():
    assert -C1 == Complex(-1, -2)
    assert C1.conjugate() == Complex(1, -2)
    assert C1 == Complex(1, 2)


def test_abs():
    assert abs(Complex(3, 4)) == 5.0


def test_pow():
    assert Complex(0, 1) ** 2 == Complex(-1, 0)
    assert C1 ** 0 == Complex(1, 0)
    assert Complex(0, 1) ** -1 == Complex(0, -1)
    assert Complex() ** 3 == Complex()


def test_zero_to_zero_raises():
    with pytest.raises(ValueError):
        Complex() ** 0


def test_str():
    assert str(Complex(1, 2)) == "{1,2}"
    assert str(Complex(1.5, -0.25)) == "{1.5,-0.25}"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{1,2}", Complex(1, 2)),
        ("  { -1.5 , 3e2 } ", Complex(-1.5, 300)),
        ("{.5,0}", Complex(0.5, 0)),
    ],
)
def test_parse(text, expected):
    assert Complex.parse(text) == expected


@pytest.mark.parametrize("text", ["(1,2)", "{1;2}", "{1,2", "1,2}", "{a,2}", ""])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Complex.parse(text)


def test_str_parse_round_trip():
    value = Complex(-3.25, 7)
    assert Complex.parse(str(value)) == value