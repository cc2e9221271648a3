"""Pipeline step functions: discover, parse, extract, and write notes"""

import logging
from pathlib import Path

from boardmark.config import Settings
from boardmark.core.export import write_note
from boardmark.core.extract.extract import extract_note
from boardmark.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


def run_extract(
    path: str,
    output_dir: Path,
    settings: Settings,
    ) -> list[tuple[Path, Path]]:
    """Parse every note under path and write it to output_dir. Returns (source_path, output_file) pairs.

    Output mirrors the folder layout below path:
      output_dir / <note folder relative to path> / <slug>.<fmt>

    Two notes resolving to the same output file raise RuntimeError.
    """
    root = Path(path)
    results = []
    written: dict[Path, Path] = {}
    for p in discover_files(root):
        rel_dir = p.parent.relative_to(root) if root.is_dir() else Path()
        try:
            note = extract_note(parse_file(p))
        except Exception as e:
            raise RuntimeError(f"Failed to extract {p}: {e}") from e

        dest_dir = output_dir / rel_dir
        target = dest_dir / f"{note.slug}.{settings.output_format}"
        if target in written:
            raise RuntimeError(f"Failed to extract {p}: output {target} already written for {written[target]}")

        try:
            out_file = write_note(note, dest_dir, settings)
        except Exception as e:
            raise RuntimeError(f"Failed to extract {p}: {e}") from e
        written[out_file] = p
        logger.info("Extracted %s (%d blocks) -> %s", p, len(note.blocks), out_file)
        results.append((p, out_file))
    return results
