"""
Deterministic billing data for AI-generated reports.

The narrative comes from the text provider, but the billed services, parts
and labor are looked up from the service name so the numbers never depend
on model output. Rules are checked in order; the first keyword found in the
lower-cased service name wins.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, List, Tuple
from autoservice.utils.money import calculate_total_cost

@dataclass(frozen=True)
class CatalogPart:
    name: str
    cost: Decimal
    quantity: int = 1

@dataclass(frozen=True)
class ServiceBreakdown:
    services_performed: Tuple[str, ...]
    parts_replaced: Tuple[CatalogPart, ...]
    labor_cost: Decimal

    @property
    def total_cost(self) -> Decimal:
        return calculate_total_cost(
            ((part.cost, part.quantity) for part in self.parts_replaced),
            self.labor_cost
        )

def _keyword(word: str) -> Callable[[str], bool]:
    return lambda service_name: word in service_name

OIL_CHANGE = ServiceBreakdown(
    services_performed=("Oil Change", "Oil Filter Replacement", "Fluid Level Check", "Multi-point Inspection"),
    parts_replaced=(CatalogPart("Engine Oil (5W-30)", Decimal("35")), CatalogPart("Oil Filter", Decimal("12"))),
    labor_cost=Decimal("45"),
)

BRAKES = ServiceBreakdown(
    services_performed=("Brake Pad Inspection", "Brake Fluid Check", "Rotor Inspection", "Brake System Test"),
    parts_replaced=(CatalogPart("Front Brake Pads", Decimal("85")), CatalogPart("Brake Fluid", Decimal("15"))),
    labor_cost=Decimal("120"),
)

TIRES = ServiceBreakdown(
    services_performed=("Tire Rotation", "Tire Pressure Check", "Wheel Alignment Check", "Tread Depth Inspection"),
    parts_replaced=(),
    labor_cost=Decimal("60"),
)

WASH = ServiceBreakdown(
    services_performed=("Exterior Wash", "Interior Vacuum", "Window Cleaning", "Tire Shine"),
    parts_replaced=(),
    labor_cost=Decimal("35"),
)

GENERAL = ServiceBreakdown(
    services_performed=("General Inspection", "Fluid Level Check", "Battery Test", "Light Check"),
    parts_replaced=(CatalogPart("Air Filter", Decimal("25")),),
    labor_cost=Decimal("75"),
)

RULES: List[Tuple[Callable[[str], bool], ServiceBreakdown]] = [
    (_keyword("oil"), OIL_CHANGE),
    (_keyword("brake"), BRAKES),
    (_keyword("tire"), TIRES),
    (_keyword("wash"), WASH),
]

def classify_service(service_name: str) -> ServiceBreakdown:
    name = (service_name or "").lower()
    for matches, breakdown in RULES:
        if matches(name):
            return breakdown
    return GENERAL
