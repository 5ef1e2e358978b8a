"""Command-line interface for pipework."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from .codegen import render_dot, render_go, render_snapshot
from .config import ConfigError, PipeworkConfig, get_config
from .external import CollaboratorError, build_package, dot_to_svg, format_go
from .graph.codec import dumps_graph, load_graph, save_graph
from .graph.examples import example_graph
from .graph.model import Graph
from .output.formatter import format_validation_result
from .schema.errors import (
    DecodeError,
    DocumentLoadError,
    NameConflictError,
    ReferentialError,
    TemplateError,
    ValidationError,
)
from .validators.runner import validate_graph_file

LOAD_ERRORS = (DocumentLoadError, DecodeError, ReferentialError, ValidationError, NameConflictError)


@contextmanager
def _document_errors() -> Iterator[None]:
    """Report a document that cannot be read or built, then exit with status 2."""
    try:
        yield
    except DecodeError as e:
        click.echo(f"Document error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except LOAD_ERRORS as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)


def _load(document_file: str) -> Graph:
    with _document_errors():
        return load_graph(document_file)


def _config() -> PipeworkConfig:
    try:
        return get_config()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output")
def main(verbose: bool):
    """pipework: build goroutine-and-channel programs from graphs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("document_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(document_file: str, output_format: str, strict: bool):
    """Lint a graph document.

    DOCUMENT_FILE is the path to a JSON or YAML graph document.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or document error
    """
    with _document_errors():
        result = validate_graph_file(document_file)

    click.echo(format_validation_result(result, output_format))  # type: ignore

    failed = result.has_errors or (strict and result.has_warnings)
    sys.exit(1 if failed else 0)


@main.command()
@click.argument("document_file", type=click.Path(exists=True))
@click.option(
    "--target",
    type=click.Choice(["go", "dot", "json", "yaml", "svg"]),
    default="go",
    help="What to render",
)
@click.option("--gofmt", "use_gofmt", is_flag=True, default=False, help="Pipe Go output through gofmt")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write to a file instead of stdout")
def render(document_file: str, target: str, use_gofmt: bool, output: str | None):
    """Render a graph document as Go, dot, SVG or a normalised document.

    Exit codes:
      0 - Success
      1 - Rendering or external tool failure
      2 - File or document error
    """
    graph = _load(document_file)

    try:
        if target == "go":
            text = render_go(graph)
            if use_gofmt:
                text = format_go(text, _config())
        elif target == "dot":
            text = render_dot(graph)
        elif target == "svg":
            text = dot_to_svg(render_dot(graph), _config())
        else:
            text = dumps_graph(graph, target)  # type: ignore
    except (TemplateError, CollaboratorError) as e:
        click.echo(f"Render error: {e}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Wrote {output}")
    else:
        click.echo(text, nl=False)


@main.command("rename-node")
@click.argument("document_file", type=click.Path(exists=True))
@click.argument("old")
@click.argument("new")
@click.option("--in-place", is_flag=True, default=False, help="Rewrite DOCUMENT_FILE")
def rename_node(document_file: str, old: str, new: str, in_place: bool):
    """Rename node OLD to NEW, rewriting every channel that refers to it.

    Exit codes:
      0 - Success
      1 - Rename rejected
      2 - File or document error
    """
    graph = _load(document_file)

    try:
        graph.rename_node(old, new)
    except (ValidationError, ReferentialError, NameConflictError) as e:
        click.echo(f"Rename failed: {e}", err=True)
        sys.exit(1)

    if in_place:
        save_graph(graph, document_file)
        click.echo(f"Renamed {old!r} to {new!r} in {document_file}")
    else:
        suffix = Path(document_file).suffix
        click.echo(dumps_graph(graph, "yaml" if suffix in (".yaml", ".yml") else "json"), nl=False)


@main.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Document format",
)
def example(output_format: str):
    """Print the built-in example graph document."""
    click.echo(dumps_graph(example_graph(), output_format), nl=False)  # type: ignore


@main.command()
@click.argument("document_file", type=click.Path(exists=True))
@click.argument("directory", type=click.Path(file_okay=False))
def build(document_file: str, directory: str):
    """Write DIRECTORY/main.go from a graph and run go build there.

    The binary is named after the graph's package name.

    Exit codes:
      0 - Success
      1 - Rendering, formatting or build failure
      2 - File or document error
    """
    graph = _load(document_file)
    config = _config()

    try:
        snapshot = render_snapshot(graph)
        source = format_go(snapshot.go, config)
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        (out_dir / "main.go").write_text(source, encoding="utf-8")
        go_mod = out_dir / "go.mod"
        if not go_mod.exists():
            module = graph.package_path or graph.package_name or "main"
            go_mod.write_text(f"module {module}\n\ngo 1.21\n", encoding="utf-8")
        binary = build_package(out_dir, graph.package_name or "main", config)
    except (TemplateError, CollaboratorError) as e:
        click.echo(f"Build failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"Built {binary}")
    sys.exit(0)


if __name__ == "__main__":
    main()
