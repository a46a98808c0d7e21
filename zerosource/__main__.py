from zerosource.cli.main import app

app(prog_name="zerosource")
