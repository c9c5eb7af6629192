"""
Seed script to populate the default access configuration.

Creates, when missing:
- Default roles (Administrador, Tesorero, Pastor General)
- Default modules and their options, with role assignments
- An admin user holding the Administrador role

Usage:
    uv run python -m scripts.seed_access
    ADMIN_PASSWORD=secret uv run python -m scripts.seed_access
"""
import asyncio
import os

from app.core.database.engine import AsyncSessionLocal, init_db
from app.core.store.seed import seed_demo_data
from app.core.store.sql import SqlEntityStore
from app.utils import get_logger


log = get_logger(__name__)


async def main() -> None:
    log.info("Initializing database...")
    await init_db()
    async with AsyncSessionLocal() as session:
        await seed_demo_data(SqlEntityStore(session), admin_password=os.environ.get("ADMIN_PASSWORD"))
    log.info("Seeding complete")


if __name__ == "__main__":
    asyncio.run(main())
