"""Tests for MCP tool core functions."""

from typing import Any

from figma_codegen.mcp.server import codegen_generate, codegen_summarize


def test_codegen_generate_returns_components(sample_export: dict[str, Any]) -> None:
    result = codegen_generate(sample_export)
    assert "error" not in result
    assert result["count"] == 1
    component = result["components"][0]
    assert component["name"] == "PrimaryButton"
    assert "markup" in component
    assert component["accessibility"]["complianceTier"] == "AA"


def test_codegen_generate_accepts_camel_case_options(sample_export: dict[str, Any]) -> None:
    result = codegen_generate(
        sample_export,
        options={"framework": "vue", "styling": "css-modules", "typescript": False},
        custom_code={"advancedStyle": "@keyframes pulse {}"},
    )
    assert result["count"] == 1
    component = result["components"][0]
    assert component["markup"].startswith("<script setup>")
    assert "=== ADVANCED STYLE ===" in component["style"]


def test_codegen_generate_reports_unsupported_options(sample_export: dict[str, Any]) -> None:
    result = codegen_generate(sample_export, options={"framework": "html"})
    assert "typescript" in result["error"].lower()
    assert result["count"] == 0

    result = codegen_generate(sample_export, options={"styling": "sass"})
    assert "sass" in result["error"]


def test_codegen_generate_reports_bad_documents() -> None:
    result = codegen_generate({"nothing": True})
    assert "error" in result
    assert result["components"] == []


def test_codegen_summarize(sample_export: dict[str, Any]) -> None:
    result = codegen_summarize(sample_export)
    assert result["name"] == "Marketing Site"
    assert result["total_nodes"] == 7
    assert result["node_type_counts"]["TEXT"] == 2
    assert result["frame_candidates"] == 2
