import typer

from .init import app as init_app
from .seed import app as seed_app

app = typer.Typer()

app.add_typer(init_app)
app.add_typer(seed_app)
