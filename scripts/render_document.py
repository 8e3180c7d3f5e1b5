#!/usr/bin/env python3
"""
Command-line interface for rendering node trees against context data.

Subcommands:
- render: Prerender a node tree once and render it against each context file
- inspect: Show the compiled formula of a node tree
"""

import importlib
from pathlib import Path
from typing import List, Optional

import typer

from trellis.contexts.binding import ResolutionError, load_context
from trellis.contexts.rendering import Literal, Renderer
from trellis.contexts.rendering.logger import setup_rendering_logger

app = typer.Typer(
    add_completion=False,
    help="Render trellis documents against YAML/JSON context data",
    invoke_without_command=True,
)


def import_node(target: str):
    """
    Import a node tree given as 'package.module:attribute'.

    A callable attribute is called without arguments to build the tree.
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise typer.BadParameter(f"Expected 'module:attribute', got '{target}'")

    module = importlib.import_module(module_name)
    node = getattr(module, attribute)
    return node() if callable(node) and not hasattr(node, "build") else node


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    target: str = typer.Argument(..., help="Node tree as 'package.module:attribute'"),
    context: List[Path] = typer.Option(
        [], "--context", "-c", help="YAML/JSON context file (repeatable)"
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Write one .html file per context instead of printing"
    ),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Enable logging to this directory"),
):
    """
    Render a document once per context file, reusing a single formula.

    Example:\n

        $ render_document.py render mysite.pages:home -c ann.yaml -c bob.yaml -o out/
    """
    if log_dir is not None:
        setup_rendering_logger(log_dir, formula_name=target)

    renderer = Renderer()
    formula = renderer.prerender(import_node(target))

    contexts = context or [None]
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for context_path in contexts:
        data = load_context(context_path) if context_path is not None else None
        label = context_path.name if context_path is not None else "<no context>"

        try:
            text = renderer.render(formula, data)
        except ResolutionError as e:
            failures += 1
            typer.secho(f"✗ {label}: {type(e).__name__}: {e.message}", fg=typer.colors.RED, err=True)
            if e.path:
                typer.secho(f"  Path: {e.path}", fg=typer.colors.RED, err=True)
            continue

        if output_dir is None:
            typer.echo(text)
        else:
            stem = context_path.stem if context_path is not None else "document"
            output_path = output_dir / f"{stem}.html"
            output_path.write_text(text, encoding="utf-8")
            typer.secho(f"✓ {label} -> {output_path}", fg=typer.colors.GREEN)

    if failures:
        raise typer.Exit(code=1)


@app.command("inspect")
def inspect_command(
    target: str = typer.Argument(..., help="Node tree as 'package.module:attribute'"),
):
    """
    Print the instructions of the compiled formula.

    Example:\n

        $ render_document.py inspect mysite.pages:home
    """
    formula = Renderer().prerender(import_node(target))

    typer.secho(
        f"\n{len(formula)} instructions ({formula.dynamic_count} dynamic):",
        fg=typer.colors.BLUE,
        bold=True,
    )
    for index, instruction in enumerate(formula):
        if isinstance(instruction, Literal):
            typer.echo(f"  {index:3d}  Literal         {instruction.text!r}")
        else:
            source = getattr(instruction.value, "path", instruction.value)
            typer.secho(
                f"  {index:3d}  {type(instruction).__name__:<15} {source}",
                fg=typer.colors.YELLOW,
            )


if __name__ == "__main__":
    app()
