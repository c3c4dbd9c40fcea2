from decimal import Decimal

from autoservice.utils.money import calculate_parts_cost, calculate_total_cost, to_money


def test_total_is_labor_plus_parts_times_quantity():
    assert calculate_total_cost([(Decimal("10"), 2)], Decimal("50")) == Decimal("70.00")


def test_float_inputs_do_not_drift():
    parts = [(0.1, 3), (19.99, 1)]

    assert calculate_parts_cost(parts) == Decimal("20.29")
    assert calculate_total_cost(parts, 0.2) == Decimal("20.49")


def test_no_parts():
    assert calculate_total_cost([], "35") == Decimal("35.00")


def test_to_money_rounds_half_up():
    assert to_money("2.005") == Decimal("2.01")
