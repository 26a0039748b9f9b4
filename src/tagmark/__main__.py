from tagmark.cli import app

app()
