#!/usr/bin/env python3
"""
Populate the service catalog
Run with: python seed_services.py   (uses DATABASE_URL from the environment / .env)
"""
import asyncio
import sys
from sqlalchemy import select
from autoservice.database import async_session_maker, init_db, close_db
from autoservice.models import Service
from autoservice.services.catalog_service import CatalogService

async def verify_data(session):
    """Print the catalog as stored"""
    print("\n" + "=" * 60)
    print("SERVICES:")
    print("=" * 60)
    result = await session.execute(select(Service).order_by(Service.base_price))
    for service in result.scalars():
        print(
            f"  {service.name:<28} ${service.base_price:<7} "
            f"{service.estimated_duration_minutes:>3} min  "
            f"{service.category.value:<12} {service.vehicle_type.value}"
        )

async def main():
    print("=" * 60)
    print("SEED SERVICE CATALOG")
    print("=" * 60)

    await init_db()
    try:
        async with async_session_maker() as session:
            inserted = await CatalogService(session).seed_services()
            if inserted:
                print(f"✅ Inserted {inserted} services")
            else:
                print("⏭️  Catalog already populated, skipping")
            await verify_data(session)
    finally:
        await close_db()

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
