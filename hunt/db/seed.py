"""Task catalog seeding."""

import asyncio

from loguru import logger

from hunt.core.config import get_settings
from hunt.db.session import Database
from hunt.services.task_service import TaskService

# (title, description, points), inserted in this order on a fresh database
SEED_TASKS: list[tuple[str, str, int]] = [
    (
        "Best Jalebi in Mirsharai Bazar",
        "Find the crispiest, juiciest Jalebi and snap a photo of the stall.",
        15,
    ),
    (
        "Sunset at Mahamaya Lake",
        "Capture the golden hour at the beautiful Mahamaya Lake.",
        20,
    ),
    (
        "Unique Mosque Lighting",
        "Find a mosque with beautiful or unique Ramadan decorations.",
        15,
    ),
    (
        "Iftar Table Spread",
        "Show us your delicious home or restaurant Iftar spread.",
        10,
    ),
    (
        "The Busy Bazar Rush",
        "Capture the energy of the Mirsarai Bazar just before Iftar.",
        10,
    ),
    (
        "General Discovery",
        "Share any special moment or find from your Mirsarai journey.",
        5,
    ),
]


async def seed_tasks(database: Database) -> int:
    """Seed the task catalog if it is empty. Returns the number of tasks added."""
    async with database.session() as db:
        return await TaskService(db).seed_if_empty(SEED_TASKS)


async def seed_all(database: Database) -> None:
    """Create tables and seed the catalog."""
    logger.info("Starting database seeding...")
    await database.create_tables()
    await seed_tasks(database)
    logger.info("Database seeding completed!")


async def clear_all(database: Database) -> None:
    """Drop and recreate all tables, then reseed the catalog."""
    await database.drop_tables()
    await seed_all(database)
    logger.info("All tables cleared and reseeded")


async def main(clear: bool = False) -> None:
    database = Database(get_settings().database_url)
    database.connect()
    try:
        if clear:
            await clear_all(database)
        else:
            await seed_all(database)
    finally:
        await database.dispose()


def run() -> None:
    """Console entry point: seed the configured database, or reset it with --clear."""
    import sys

    asyncio.run(main(clear=len(sys.argv) > 1 and sys.argv[1] == "--clear"))


if __name__ == "__main__":
    run()
