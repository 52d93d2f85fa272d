"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdxlive.cli.commands import build_cmd, components_cmd, generate_cmd, init_cmd


app = typer.Typer(name="mdxlive", no_args_is_help=True, help="Component documentation with live Web Component previews")

app.command(name="build")(build_cmd)
app.command(name="components")(components_cmd)
app.command(name="generate")(generate_cmd)
app.command(name="init")(init_cmd)
