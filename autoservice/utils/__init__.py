from autoservice.utils.dates import (
    utcnow,
    as_utc,
    shift_days,
    format_service_date,
)
from autoservice.utils.money import (
    to_money,
    calculate_parts_cost,
    calculate_total_cost,
)

__all__ = [
    "utcnow",
    "as_utc",
    "shift_days",
    "format_service_date",
    "to_money",
    "calculate_parts_cost",
    "calculate_total_cost",
]
