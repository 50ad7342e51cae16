from decimal import Decimal
from uuid import UUID

from loguru import logger

from menu_api.db.database import create_null_pool_engine
from menu_api.models import Base
from menu_api.services import CategoryService
from menu_api.utils.unitofwork import UnitOfWorkNoPool

SEED_CATEGORIES = ("Pizza", "Pasta", "Bevande")
FIRST_MENU_ID = UUID("5c03994c-fc16-47e0-bd02-d218a370a078")


async def create_tables(drop: bool = False) -> None:
    engine = create_null_pool_engine()

    async with engine.begin() as connection:
        if drop:
            await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)

    await engine.dispose()


async def seed() -> dict[str, UUID]:
    """
    Insert default categories and the first menu item, existing rows are kept.

    Returns:
        mapping of category name to its id
    """
    categories: dict[str, UUID] = {}

    async with UnitOfWorkNoPool() as uow:
        for name in SEED_CATEGORIES:
            category = await uow.category.get_one_or_none(name=name)

            if category is None:
                category = await uow.category.create({"name": name})
                logger.info(f"Category {name} created")

            categories[name] = category.id

        first_menu = {
            "title": "First Post",
            "text": "This is an example post generated from the seed command",
            "price": Decimal("9.99"),
            "ingredients": "ingredient1, ingredient2",
            "category_id": categories["Pizza"],
        }

        if await uow.menu.exist(id=FIRST_MENU_ID):
            await uow.menu.update({"category_id": categories["Pizza"]}, id=FIRST_MENU_ID)
        else:
            await uow.menu.create({"id": FIRST_MENU_ID, **first_menu})
            logger.info("First menu item created")

    await CategoryService.invalidate_cache()
    return categories
