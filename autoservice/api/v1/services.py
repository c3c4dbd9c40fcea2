from fastapi import APIRouter, Depends
from typing import List, Optional
from uuid import UUID
from autoservice.dependencies import get_catalog_service
from autoservice.models import ServiceCategory, VehicleType
from autoservice.schemas.service import ServiceResponse, SeedResult
from autoservice.services.catalog_service import CatalogService

router = APIRouter(prefix="/services", tags=["Service Catalog"])

@router.get("/", response_model=List[ServiceResponse])
async def list_services(
    vehicle_type: Optional[VehicleType] = None,
    catalog: CatalogService = Depends(get_catalog_service)
):
    """List catalog services, optionally only those available for a vehicle type"""
    return await catalog.list_services(vehicle_type)

@router.get("/category/{category}", response_model=List[ServiceResponse])
async def get_services_by_category(
    category: ServiceCategory,
    catalog: CatalogService = Depends(get_catalog_service)
):
    return await catalog.get_services_by_category(category)

@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(
    service_id: UUID,
    catalog: CatalogService = Depends(get_catalog_service)
):
    return await catalog.get_service(service_id)

@router.post("/seed", response_model=SeedResult)
async def seed_services(catalog: CatalogService = Depends(get_catalog_service)):
    """Populate the default catalog (no-op once any service exists)"""
    inserted = await catalog.seed_services()
    return SeedResult(inserted=inserted)
