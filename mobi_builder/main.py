"""Entry-point for the outline to MOBI markup pipeline."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from mobi_builder.book import MobiDocument
from mobi_builder.model.document_model import ContentBundle
from mobi_builder.model.settings import Settings
from mobi_builder.parser.outline_parser import load_outline
from mobi_builder.utils.debug import DebugDumper
from mobi_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

MARKUP_FILENAME = "book.html"
IMAGE_FILENAME_TEMPLATE = "image-{index:04d}{suffix}"


def parse_meta_value(raw: str) -> Any:
    """Interpret ``--meta`` values as JSON when possible, otherwise as plain text."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def build_settings(
    title: Optional[str] = None,
    toc: bool = True,
    meta: Iterable[str] = (),
    metadata_file: Optional[Path] = None,
) -> Settings:
    """Merge metadata sources: JSON file first, then ``key=value`` pairs, then explicit flags."""
    values: Dict[str, Any] = {}
    if metadata_file is not None:
        loaded = json.loads(metadata_file.read_text(encoding="utf-8"))
        if not isinstance(loaded, dict):
            raise ValueError(f"Metadata file must contain a JSON object: {metadata_file}")
        values.update(loaded)
    for item in meta:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Metadata must be given as key=value, got {item!r}")
        values[key.strip()] = parse_meta_value(raw)

    settings = Settings.from_mapping(values)
    if title is not None:
        settings.title = title
    if not toc:
        settings.toc = False
    return settings


def build_document(outline_path: Path, settings: Optional[Settings] = None) -> MobiDocument:
    """Load an outline file into a document ready for assembly."""
    return load_outline(outline_path, settings=settings)


def render_outputs(document: MobiDocument, output_dir: Path, *, debug: bool = False) -> ContentBundle:
    """Write the assembled markup and image records into ``output_dir``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    bundle = document.export()
    (output_dir / MARKUP_FILENAME).write_bytes(bundle.markup_bytes)
    for index, record in enumerate(bundle.images):
        suffix = "." + str(record.metadata.get("format") or "bin").lower()
        (output_dir / IMAGE_FILENAME_TEMPLATE.format(index=index + 1, suffix=suffix)).write_bytes(record.binary_data)
    LOGGER.info("Wrote %d bytes of markup and %d images into %s", len(bundle.markup_bytes), len(bundle.images), output_dir)
    if debug:
        DebugDumper(output_dir / "debug").dump(document)
    return bundle


def main(outline_file: str, output_dir: Optional[str] = None, settings: Optional[Settings] = None, debug: bool = False) -> ContentBundle:
    """Run the outline → document → markup pipeline."""
    outline_path = Path(outline_file).resolve()
    if not outline_path.exists():
        raise FileNotFoundError(f"Outline file not found: {outline_path}")

    LOGGER.info("Building document from %s", outline_path.name)
    document = build_document(outline_path, settings)

    output_path = Path(output_dir).resolve() if output_dir else outline_path.with_suffix("")
    LOGGER.info("Rendering outputs into %s", output_path)
    return render_outputs(document, output_path, debug=debug)


def cli() -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Assemble MOBI markup and image records from a text outline")
    parser.add_argument("outline_file", help="Path to the outline text file")
    parser.add_argument("--output", help="Directory to write generated artifacts")
    parser.add_argument("--title", help="Book title (overrides the outline's %% line)")
    parser.add_argument("--no-toc", action="store_true", help="Do not generate a table of contents")
    parser.add_argument("--meta", action="append", default=[], metavar="KEY=VALUE", help="Extra metadata for the packer")
    parser.add_argument("--metadata", help="JSON file with metadata for the packer")
    parser.add_argument("--debug", action="store_true", help="Dump resolved offsets as JSON")

    args = parser.parse_args()
    settings = build_settings(
        title=args.title,
        toc=not args.no_toc,
        meta=args.meta,
        metadata_file=Path(args.metadata) if args.metadata else None,
    )
    main(args.outline_file, args.output, settings=settings, debug=args.debug)


if __name__ == "__main__":  # pragma: no cover
    cli()
