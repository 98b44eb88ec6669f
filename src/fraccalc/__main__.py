from fraccalc.cli import app

app()
