from hookstage.cli import app

app(prog_name="hookstage")
