import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from dhc_abox.cli.compile import compile_workspace
from dhc_abox.cli.serve import serve_app
from dhc_abox.cli.validate import validate
from dhc_abox.core.config import load_config

app = typer.Typer(
    name="dhc-abox",
    help="DHC A-Box CLI: compile block designs to ontology instances and check them against NF C 15-100.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("compile")(compile_workspace)
app.command("validate")(validate)
app.add_typer(serve_app, name="serve")


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[Path | None, typer.Option(help="JSON file overriding the ontology configuration.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    if ctx.resilient_parsing:
        return
    try:
        ctx.obj = load_config(config)
    except (FileNotFoundError, ValueError) as exc:
        Console(stderr=True).print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(1) from exc


def main() -> None:
    app()
