import warnings

import typer

from .db import app as db_app

warnings.filterwarnings("ignore", category=UserWarning)
app = typer.Typer()

app.add_typer(db_app, name="db")
