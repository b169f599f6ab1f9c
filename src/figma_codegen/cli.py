"""CLI for figma-codegen (generate, info, MCP server)."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from figma_codegen.core.analysis.summary import summarize_document
from figma_codegen.core.importer.loader import load_document, load_text
from figma_codegen.engine import generate_artifacts
from figma_codegen.logging_config import configure_logging
from figma_codegen.models.artifact import GeneratedArtifact
from figma_codegen.models.node import DesignDocument
from figma_codegen.models.options import (
    CustomCodeInputs,
    Framework,
    GenerationOptions,
    Styling,
    UnsupportedOptionsError,
)
from figma_codegen.protocols import ArtifactSinkProtocol
from figma_codegen.writer import ArtifactWriter

app = typer.Typer(help="Generate component source from design-tool exports.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _load(path: Path) -> DesignDocument:
    try:
        return load_document(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot load {}: {}", path, e)
        raise typer.Exit(1) from None


def write_all(
    sink: ArtifactSinkProtocol,
    artifacts: list[GeneratedArtifact],
    options: GenerationOptions,
) -> list[str]:
    """Hand every artifact to ``sink``, returning all names written."""
    names: list[str] = []
    for artifact in artifacts:
        names += sink.write_artifact(artifact, options=options)
    return names


def _score_band(score: int) -> str:
    if score >= 90:
        return "good"
    if score >= 70:
        return "fair"
    return "poor"


@app.command()
def generate(
    document_path: Path = typer.Argument(..., help="Design export (.json)"),
    framework: Framework = typer.Option(Framework.REACT, "--framework", "-f"),
    styling: Styling = typer.Option(Styling.TAILWIND, "--styling", "-s"),
    typescript: bool = typer.Option(True, "--typescript/--no-typescript"),
    accessibility: bool = typer.Option(True, "--accessibility/--no-accessibility"),
    responsive: bool = typer.Option(True, "--responsive/--no-responsive"),
    optimize_images: bool = typer.Option(True, "--optimize-images/--no-optimize-images"),
    inline_styles: bool = typer.Option(False, "--inline-styles", help="Emit style attributes"),
    custom_markup: Annotated[
        Path | None,
        typer.Option("--custom-markup", help="File appended to each component's markup"),
    ] = None,
    custom_style: Annotated[
        Path | None,
        typer.Option("--custom-style", help="File appended to each stylesheet"),
    ] = None,
    advanced_style: Annotated[
        Path | None,
        typer.Option("--advanced-style", help="Animations etc. appended after custom style"),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write files into this directory"),
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output artifacts as JSON"),
) -> None:
    """Generate components from a design export."""
    document = _load(document_path)
    options = GenerationOptions(
        framework=framework,
        styling=styling,
        typescript=typescript,
        accessibility=accessibility,
        responsive=responsive,
        optimize_images=optimize_images,
        inline_styles=inline_styles,
    )
    custom = CustomCodeInputs(
        markup=load_text(custom_markup),
        style=load_text(custom_style),
        advanced_style=load_text(advanced_style),
    )

    try:
        artifacts = generate_artifacts(document, options, custom)
    except UnsupportedOptionsError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from None

    writer = ArtifactWriter(out, dry_run=dry_run) if out is not None else None
    names: list[str] = []
    if writer is not None:
        names = write_all(writer, artifacts, options)

    if output_json:
        typer.echo(json.dumps([a.to_dict() for a in artifacts], indent=2))
        return

    if writer is not None:
        typer.echo(
            f"Wrote {len(writer.written)} files for {len(artifacts)} components "
            f"({writer.num_same} unchanged, {len(names)} total) to {writer.outdir}"
        )
    else:
        for artifact in artifacts:
            typer.echo(f"// ----- {artifact.name} ({artifact.id}) -----")
            typer.echo(artifact.markup)
            typer.echo(artifact.style)
            typer.echo()

    for artifact in artifacts:
        meta = artifact.metadata
        line = (
            f"  {artifact.name}: {meta.component_type.value}, {meta.complexity.value}, "
            f"accuracy {meta.estimated_accuracy}% ({_score_band(meta.estimated_accuracy)})"
        )
        if artifact.accessibility is not None:
            a11y = artifact.accessibility
            line += f", a11y {a11y.score} WCAG {a11y.compliance}"
        typer.echo(line)


@app.command()
def info(
    document_path: Path = typer.Argument(..., help="Design export (.json)"),
) -> None:
    """Summarize a design export."""
    document = _load(document_path)
    summary = summarize_document(document)
    typer.echo(f"{document.name or document_path.name}")
    typer.echo(f"  nodes: {summary.total_nodes}")
    typer.echo(f"  declared components: {summary.component_count}")
    typer.echo(f"  frames with children: {summary.frame_candidates}")
    for node_type, count in summary.node_type_counts:
        typer.echo(f"    {node_type}: {count}")


@app.command()
def serve() -> None:
    """Start the MCP server (stdio transport)."""
    from figma_codegen.mcp.server import run_mcp_server

    run_mcp_server()
