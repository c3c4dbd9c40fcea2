from decimal import Decimal
import uuid

import pytest

from autoservice.exceptions import NotFound
from autoservice.models import ServiceCategory, ServiceVehicleType, VehicleType
from autoservice.services.catalog_service import CatalogService


async def test_seed_inserts_six_services_once(db):
    catalog = CatalogService(db)

    assert await catalog.seed_services() == 6
    assert await catalog.seed_services() == 0
    assert len(await catalog.list_services()) == 6


async def test_seeded_prices(db):
    catalog = CatalogService(db)
    await catalog.seed_services()

    prices = {s.name: s.base_price for s in await catalog.list_services()}
    assert prices["Regular Oil Change"] == Decimal("45")
    assert prices["Brake Service"] == Decimal("180")
    assert prices["Motorbike Wash & Detail"] == Decimal("25")


async def test_filter_by_category(db):
    catalog = CatalogService(db)
    await catalog.seed_services()

    washes = await catalog.get_services_by_category(ServiceCategory.WASH)
    assert {s.name for s in washes} == {"Premium Car Wash", "Motorbike Wash & Detail"}


async def test_filter_by_vehicle_type_includes_both(db):
    catalog = CatalogService(db)
    await catalog.seed_services()

    motorbike = await catalog.list_services(VehicleType.MOTORBIKE)
    names = {s.name for s in motorbike}
    assert "Premium Car Wash" not in names
    assert "Motorbike Wash & Detail" in names
    assert all(s.vehicle_type != ServiceVehicleType.CAR for s in motorbike)


async def test_get_unknown_service(db):
    with pytest.raises(NotFound):
        await CatalogService(db).get_service(uuid.uuid4())
