from csquares.cli import app

app(prog_name="csquares")
