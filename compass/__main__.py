from compass.cli import app

app(prog_name="compass")
