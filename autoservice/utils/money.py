from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple, Union

Number = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")


def to_money(value: Number) -> Decimal:
    """Convert to a Decimal rounded to cents"""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_parts_cost(parts: Iterable[Tuple[Number, int]]) -> Decimal:
    """Sum of cost * quantity over (cost, quantity) pairs"""
    total = Decimal("0")
    for cost, quantity in parts:
        total += Decimal(str(cost)) * quantity
    return to_money(total)


def calculate_total_cost(parts: Iterable[Tuple[Number, int]], labor_cost: Number) -> Decimal:
    """Report total: labor plus every part's cost times its quantity"""
    return to_money(calculate_parts_cost(parts) + Decimal(str(labor_cost)))
