import logging
from typing import List, Optional
from decimal import Decimal
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_
from autoservice.exceptions import NotFound
from autoservice.models import Service, ServiceCategory, ServiceVehicleType, VehicleType

logger = logging.getLogger(__name__)

# (name, description, base price, minutes, category, vehicle type)
DEFAULT_SERVICES = [
    (
        "Regular Oil Change",
        "Complete oil and filter change with multi-point inspection",
        Decimal("45"), 30, ServiceCategory.MAINTENANCE, ServiceVehicleType.BOTH,
    ),
    (
        "Full Service",
        "Comprehensive maintenance including oil change, brake check, and fluid top-up",
        Decimal("120"), 90, ServiceCategory.MAINTENANCE, ServiceVehicleType.BOTH,
    ),
    (
        "Brake Service",
        "Brake pad replacement and brake system inspection",
        Decimal("180"), 120, ServiceCategory.REPAIR, ServiceVehicleType.BOTH,
    ),
    (
        "Premium Car Wash",
        "Exterior wash, interior cleaning, and wax application",
        Decimal("35"), 45, ServiceCategory.WASH, ServiceVehicleType.CAR,
    ),
    (
        "Motorbike Wash & Detail",
        "Complete cleaning and detailing for motorcycles",
        Decimal("25"), 30, ServiceCategory.WASH, ServiceVehicleType.MOTORBIKE,
    ),
    (
        "Annual Safety Inspection",
        "Comprehensive safety and emissions inspection",
        Decimal("75"), 60, ServiceCategory.INSPECTION, ServiceVehicleType.BOTH,
    ),
]

class CatalogService:
    """Read access to the service catalog plus one-time seeding"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_services(self, vehicle_type: Optional[VehicleType] = None) -> List[Service]:
        query = select(Service).order_by(Service.base_price)
        if vehicle_type is not None:
            query = query.where(
                or_(
                    Service.vehicle_type == ServiceVehicleType(vehicle_type.value),
                    Service.vehicle_type == ServiceVehicleType.BOTH
                )
            )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_services_by_category(self, category: ServiceCategory) -> List[Service]:
        result = await self.db.execute(
            select(Service)
            .where(Service.category == category)
            .order_by(Service.base_price)
        )
        return list(result.scalars().all())

    async def get_service(self, service_id: UUID) -> Service:
        service = await self.db.get(Service, service_id)
        if not service:
            raise NotFound("Service not found")
        return service

    async def seed_services(self) -> int:
        """
        Insert the default catalog

        No-op when any service row already exists. Returns the number of
        services inserted.
        """
        result = await self.db.execute(select(Service.id).limit(1))
        if result.first() is not None:
            return 0

        for name, description, price, minutes, category, vehicle_type in DEFAULT_SERVICES:
            self.db.add(Service(
                name=name,
                description=description,
                base_price=price,
                estimated_duration_minutes=minutes,
                category=category,
                vehicle_type=vehicle_type
            ))

        await self.db.commit()
        logger.info(f"Seeded {len(DEFAULT_SERVICES)} catalog services")
        return len(DEFAULT_SERVICES)
