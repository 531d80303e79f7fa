"""CLI entrypoint: Typer app definition and command registration"""

import typer

from gbmigrate.cli.commands import convert_cmd


app = typer.Typer(name="gbmigrate", no_args_is_help=True, help="GitBook to Hugo content migration")

app.command(name="convert")(convert_cmd)


@app.callback()
def main() -> None:
    """GitBook to Hugo content migration."""
