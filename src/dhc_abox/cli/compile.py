import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.design import run_compile
from dhc_abox.core.design_id import validate_design_id
from dhc_abox.core.errors import DesignError
from dhc_abox.core.loader import read_document

console = Console()
err_console = Console(stderr=True)


def compile_workspace(
    ctx: typer.Context,
    workspace: Annotated[Path, typer.Argument(help="Path to the saved workspace JSON.")],
    design_id: Annotated[str, typer.Option("--design-id", help="SmartHome design ID, e.g. DE-80331-MAR12-01.")],
    ttl: Annotated[Path | None, typer.Option(help="Write the triple text to this file.")] = None,
    json_out: Annotated[Path | None, typer.Option("--json", help="Write the graph JSON to this file.")] = None,
) -> None:
    """Compile a workspace into A-Box triples and graph JSON."""
    config: OntologyConfig = ctx.obj
    try:
        document = read_document(workspace)
        root_id = validate_design_id(design_id)
        compiled = run_compile(document, root_id, config)
    except (DesignError, FileNotFoundError) as exc:
        err_console.print(f"[red]Compilation failed:[/red] {exc}")
        raise typer.Exit(1) from exc

    if ttl is None and json_out is None:
        typer.echo(compiled.ttl)
        return

    if ttl is not None:
        ttl.write_text(compiled.ttl, encoding="utf-8")
        console.print(f"[green]Wrote[/green] triples to {ttl}")
    if json_out is not None:
        json_out.write_text(json.dumps(compiled.graph, indent=2), encoding="utf-8")
        console.print(f"[green]Wrote[/green] graph JSON to {json_out}")
    console.print(f"[green]Compiled[/green] {compiled.record_count} instance(s) for {root_id}")
