import decimal as _decimal
import typing as _tp

import pydantic as _pyd

COIN = 100_000_000

type ZecAmount = _tp.Annotated[_decimal.Decimal, _pyd.Field(decimal_places=8)]


def zatoshis(amount: ZecAmount) -> int:
    """Converts an amount in ZEC to an integral number of zatoshis."""
    value = amount * COIN
    if value != value.to_integral_value():
        raise ValueError(f"{amount} ZEC is not a whole number of zatoshis.")
    return int(value)
