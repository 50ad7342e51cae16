import typer
from asgiref.sync import async_to_sync

from .utils import create_tables

app = typer.Typer()


@app.command()
def init(drop: bool = typer.Option(False, "--drop", help="Drop existing tables first")):
    async_to_sync(create_tables)(drop=drop)
    typer.secho("Tables created", fg=typer.colors.GREEN)
