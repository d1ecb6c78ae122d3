import pytest

from hitparse.types import CurveType, SampleBank


@pytest.mark.parametrize(
    "value, name",
    [(0, None), (1, "normal"), (2, "soft"), (3, "drum"), (7, "7")],
)
def test_bank_name(value, name):
    assert SampleBank.bank_name(value) == name


def test_curve_type_from_token():
    assert CurveType.from_token("P") is CurveType.PerfectCurve
    assert CurveType.from_token("Q") is None
    assert CurveType.Linear.token == "L"
