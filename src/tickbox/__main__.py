from tickbox.cli import app

app(prog_name="tickbox")
