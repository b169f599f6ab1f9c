"""MCP server exposing component generation tools."""

from dataclasses import asdict
from typing import Any

from mcp.server.fastmcp import FastMCP

from figma_codegen.core.analysis.summary import summarize_document
from figma_codegen.core.importer.json_reader import parse_document_data
from figma_codegen.engine import generate_artifacts
from figma_codegen.models.options import (
    CustomCodeInputs,
    GenerationOptions,
    UnsupportedOptionsError,
)

# --- Core functions (testable without MCP context) ---


def codegen_generate(
    document: dict[str, Any],
    *,
    options: dict[str, Any] | None = None,
    custom_code: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Generate components from a design export.

    Args:
        document: File export body or a single node dict.
        options: Generation options (camelCase or snake_case keys).
        custom_code: Optional ``markup``, ``style`` and ``advancedStyle`` fragments.
    """
    try:
        parsed = parse_document_data(document)
        opts = GenerationOptions.from_mapping(options or {})
    except ValueError as e:
        return {"error": str(e), "components": [], "count": 0}

    custom = custom_code or {}
    fragments = CustomCodeInputs(
        markup=custom.get("markup", ""),
        style=custom.get("style", ""),
        advanced_style=custom.get("advancedStyle", custom.get("advanced_style", "")),
    )

    try:
        artifacts = generate_artifacts(parsed, opts, fragments)
    except UnsupportedOptionsError as e:
        return {"error": str(e), "components": [], "count": 0}

    return {
        "components": [a.to_dict() for a in artifacts],
        "count": len(artifacts),
    }


def codegen_summarize(document: dict[str, Any]) -> dict[str, Any]:
    """Count nodes, node types and generation candidates of a design export."""
    try:
        parsed = parse_document_data(document)
    except ValueError as e:
        return {"error": str(e)}
    summary = asdict(summarize_document(parsed))
    summary["node_type_counts"] = dict(summary["node_type_counts"])
    summary["name"] = parsed.name
    return summary


# --- MCP server ---

mcp_server = FastMCP(
    "figma-codegen",
    instructions="""\
Generates React, Vue or static HTML component source from design-tool JSON exports.

Call figma_summarize_design_tool first to see how many components a file will yield,
then figma_generate_components_tool with the options you need. Every component comes
with accessibility, responsiveness and fidelity reports.
""",
)


@mcp_server.tool()
async def figma_generate_components_tool(
    document: dict[str, Any],
    options: dict[str, Any] | None = None,
    custom_code: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Generate component source files from a design export.

    Args:
        document: The export JSON (``{"document": ..., "components": ...}``) or one node.
        options: framework (react|vue|html), styling (tailwind|css-modules|
            styled-components|plain-css), typescript, accessibility, responsive,
            optimizeImages, inlineStyles.
        custom_code: markup, style and advancedStyle fragments appended verbatim.
    """
    return codegen_generate(document, options=options, custom_code=custom_code)


@mcp_server.tool()
async def figma_summarize_design_tool(document: dict[str, Any]) -> dict[str, Any]:
    """Summarize a design export: node counts by type and component candidates."""
    return codegen_summarize(document)


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from figma_codegen.logging_config import configure_logging

    configure_logging(verbose=False)
    mcp_server.run(transport="stdio")
