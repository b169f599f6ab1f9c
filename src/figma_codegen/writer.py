"""Write generated artifacts to an output directory."""

import json
from pathlib import Path

from loguru import logger

from figma_codegen.models.artifact import GeneratedArtifact
from figma_codegen.models.options import Framework, GenerationOptions, Styling


def markup_extension(options: GenerationOptions) -> str:
    match options.framework:
        case Framework.REACT:
            return ".tsx" if options.typescript else ".jsx"
        case Framework.VUE:
            return ".vue"
        case Framework.HTML:
            return ".html"


def style_extension(options: GenerationOptions) -> str:
    match options.styling:
        case Styling.CSS_MODULES:
            return ".module.css"
        case Styling.STYLED_COMPONENTS:
            return ".styles.ts" if options.typescript else ".styles.js"
        case Styling.TAILWIND | Styling.PLAIN_CSS:
            return ".css"


class ArtifactWriter:
    """Write artifact files, leaving files with unchanged contents untouched.

    Each artifact becomes a markup file, a style file, an optional ``.types.ts``
    file and a ``.report.json`` with its reports. Artifacts sharing a name get
    ``-N`` suffixes.
    """

    def __init__(self, outdir: str | Path, *, dry_run: bool = False) -> None:
        self.outdir = Path(outdir).resolve()
        self.dry_run = dry_run
        self._unique_names: set[str] = set()
        self.written: list[Path] = []
        self.num_same = 0

        if not dry_run:
            self.outdir.mkdir(parents=True, exist_ok=True)
        logger.debug("Writer ready, outdir {!r}, dry_run {!r}", str(self.outdir), dry_run)

    def make_unique_name(self, base: str) -> str:
        """Append numbers to ``base`` until it was not handed out before."""
        name = base
        count = 0
        while name in self._unique_names:
            count += 1
            name = f"{base}-{count}"
        self._unique_names.add(name)
        return name

    def make_file(self, fname_rel: str, contents: str) -> None:
        """Write ``contents`` relative to the output directory unless already identical."""
        path = self.outdir / fname_rel
        if not path.resolve().is_relative_to(self.outdir):
            msg = f"Path escapes outdir: {fname_rel!r}"
            raise ValueError(msg)

        action = "create"
        try:
            if path.read_text(encoding="utf-8") == contents:
                self.num_same += 1
                return
            action = "update"
        except FileNotFoundError:
            pass

        self.written.append(path)
        if self.dry_run:
            logger.info("dry-run: would {} {}", action, path)
            return
        logger.debug("Writing ({}) {}", action, path)
        path.write_text(contents, encoding="utf-8")

    def write_artifact(
        self, artifact: GeneratedArtifact, *, options: GenerationOptions
    ) -> list[str]:
        """Write all files of one artifact, returning their relative names."""
        base = self.make_unique_name(artifact.name)
        files = {
            base + markup_extension(options): artifact.markup,
            base + style_extension(options): artifact.style,
        }
        if artifact.type_description is not None:
            files[f"{base}.types.ts"] = artifact.type_description

        report = artifact.to_dict()
        for key in ("markup", "style", "typeDescription"):
            report.pop(key, None)
        # Timing differs on every run and would defeat the unchanged-file check.
        report["metadata"].pop("generationDurationMs", None)
        files[f"{base}.report.json"] = json.dumps(report, indent=2) + "\n"

        for fname, contents in files.items():
            self.make_file(fname, contents)
        return list(files)
