import typer
from asgiref.sync import async_to_sync

from menu_api.db.redis import redis_pool

from .utils import seed as seed_database

app = typer.Typer()


async def run_seed() -> dict:
    try:
        return await seed_database()
    finally:
        await redis_pool.aclose()


@app.command()
def seed():
    categories = async_to_sync(run_seed)()

    for name, category_id in categories.items():
        typer.secho(f"{name}: {category_id}", fg=typer.colors.GREEN)
