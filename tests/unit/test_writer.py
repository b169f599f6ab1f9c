"""Tests for the artifact file writer."""

import json
from pathlib import Path

import pytest

from figma_codegen.engine import generate_artifacts
from figma_codegen.models.node import DesignDocument
from figma_codegen.models.options import Framework, GenerationOptions, Styling
from figma_codegen.protocols import ArtifactSinkProtocol
from figma_codegen.writer import ArtifactWriter, markup_extension, style_extension


@pytest.mark.parametrize(
    ("options", "markup", "style"),
    [
        (GenerationOptions(), ".tsx", ".css"),
        (GenerationOptions(typescript=False, styling=Styling.CSS_MODULES), ".jsx", ".module.css"),
        (GenerationOptions(styling=Styling.STYLED_COMPONENTS), ".tsx", ".styles.ts"),
        (GenerationOptions(framework=Framework.VUE), ".vue", ".css"),
        (GenerationOptions(framework=Framework.HTML, typescript=False), ".html", ".css"),
    ],
)
def test_extensions(options: GenerationOptions, markup: str, style: str) -> None:
    assert markup_extension(options) == markup
    assert style_extension(options) == style


def test_writer_satisfies_protocol(tmp_path: Path) -> None:
    assert isinstance(ArtifactWriter(tmp_path), ArtifactSinkProtocol)


def test_write_artifact_creates_files(tmp_path: Path, sample_document: DesignDocument) -> None:
    options = GenerationOptions()
    artifact = generate_artifacts(sample_document, options)[0]
    writer = ArtifactWriter(tmp_path)

    names = writer.write_artifact(artifact, options=options)

    assert names == [
        "PrimaryButton.tsx",
        "PrimaryButton.css",
        "PrimaryButton.types.ts",
        "PrimaryButton.report.json",
    ]
    assert (tmp_path / "PrimaryButton.tsx").read_text(encoding="utf-8") == artifact.markup
    report = json.loads((tmp_path / "PrimaryButton.report.json").read_text(encoding="utf-8"))
    assert "markup" not in report
    assert "generationDurationMs" not in report["metadata"]
    assert report["metadata"]["componentType"] == "button"


def test_unchanged_files_are_not_rewritten(
    tmp_path: Path, sample_document: DesignDocument
) -> None:
    options = GenerationOptions()
    artifact = generate_artifacts(sample_document, options)[0]
    ArtifactWriter(tmp_path).write_artifact(artifact, options=options)

    again = ArtifactWriter(tmp_path)
    again.write_artifact(generate_artifacts(sample_document, options)[0], options=options)
    assert again.num_same == 4
    assert again.written == []


def test_duplicate_names_get_suffixes(tmp_path: Path) -> None:
    writer = ArtifactWriter(tmp_path)
    assert writer.make_unique_name("Card") == "Card"
    assert writer.make_unique_name("Card") == "Card-1"
    assert writer.make_unique_name("Card") == "Card-2"


def test_dry_run_writes_nothing(tmp_path: Path, sample_document: DesignDocument) -> None:
    outdir = tmp_path / "out"
    options = GenerationOptions()
    writer = ArtifactWriter(outdir, dry_run=True)
    writer.write_artifact(generate_artifacts(sample_document, options)[0], options=options)
    assert len(writer.written) == 4
    assert not outdir.exists()


def test_path_escape_rejected(tmp_path: Path) -> None:
    writer = ArtifactWriter(tmp_path / "out")
    with pytest.raises(ValueError, match="escapes"):
        writer.make_file("../evil.css", "x")
