import decimal as _decimal

import pytest

import zcashrpc.zcash.amount as _zza


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        ("0", 0),
        ("1", 100_000_000),
        ("0.00000001", 1),
        ("21000000.12345678", 2_100_000_012_345_678),
        ("-0.5", -50_000_000),
    ],
)
def test_zatoshis(amount, expected):
    assert _zza.zatoshis(_decimal.Decimal(amount)) == expected


def test_zatoshis_rejects_fractional_zatoshis():
    with pytest.raises(ValueError):
        _zza.zatoshis(_decimal.Decimal("0.000000001"))
