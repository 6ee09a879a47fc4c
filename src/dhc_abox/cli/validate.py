import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from dhc_abox.core.config import OntologyConfig
from dhc_abox.core.design import run_validate
from dhc_abox.core.errors import DesignError
from dhc_abox.core.loader import read_document
from dhc_abox.core.ports.watcher import WorkspaceWatcherPort
from dhc_abox.models import Violation
from dhc_abox.watcher.watchfiles_adapter import DEFAULT_DEBOUNCE_MS, WorkspaceWatcher

console = Console()
err_console = Console(stderr=True)

_SEVERITY_STYLES = {"error": "red", "warning": "yellow"}


def _render_violations(violations: Sequence[Violation]) -> None:
    if not violations:
        console.print("[green]No issues found.[/green]")
        return
    table = Table(show_lines=False)
    for h in ("severity", "rule", "node", "message"):
        table.add_column(h)
    for v in violations:
        style = _SEVERITY_STYLES.get(v.severity, "")
        table.add_row(f"[{style}]{v.severity}[/{style}]", v.rule_id, v.node_id, v.message)
    console.print(table)
    console.print(f"({len(violations)} issues)")


def _check(path: Path, config: OntologyConfig, placement: bool) -> list[Violation] | None:
    """Validate and render; returns None when the workspace could not be read."""
    try:
        violations = run_validate(read_document(path), config, placement=placement)
    except (DesignError, FileNotFoundError) as exc:
        err_console.print(f"[red]Cannot validate {path}:[/red] {exc}")
        return None
    _render_violations(violations)
    return violations


def validate(
    ctx: typer.Context,
    workspace: Annotated[Path, typer.Argument(help="Path to the saved workspace JSON.")],
    placement: Annotated[bool, typer.Option(help="Also report blocks placed under an unexpected parent.")] = False,
    watch: Annotated[bool, typer.Option(help="Re-validate whenever the workspace file changes.")] = False,
    debounce: Annotated[int, typer.Option(help="Debounce window for --watch, in milliseconds.")] = DEFAULT_DEBOUNCE_MS,
) -> None:
    """Check a workspace against the NF C 15-100 / NF C 14-100 rules."""
    config: OntologyConfig = ctx.obj
    violations = _check(workspace, config, placement)

    if not watch:
        if violations is None or any(v.severity == "error" for v in violations):
            raise typer.Exit(1)
        return

    async def _on_change(path: Path) -> None:
        console.rule(str(path))
        _check(path, config, placement)

    async def _run() -> None:
        watcher: WorkspaceWatcherPort = WorkspaceWatcher(workspace, _on_change, debounce_ms=debounce)
        await watcher.start()
        console.print(f"Watching {watcher.path} (Ctrl+C to stop)")
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped.")
