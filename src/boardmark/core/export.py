"""Export: diagram asset resolution, sidecar building, and output file writing"""

import json
from pathlib import Path

import yaml

from boardmark.config import Settings
from boardmark.core.models import BlockKindEnum, DiagramAsset, ExtractedNote, FigureBlock


def resolve_diagram(block: FigureBlock, settings: Settings) -> DiagramAsset | None:
    """Map a figure's diagram id to its asset path and fallback URL; None for caption figures."""
    if block.diagram_id is None:
        return None
    return DiagramAsset(
        diagram_id=block.diagram_id,
        path=settings.diagram_path_template.format(id=block.diagram_id),
        fallback_url=settings.diagram_fallback_template.format(id=block.diagram_id),
        alt=f"Diagram D{block.diagram_id}",
    )


def build_sidecar(note: ExtractedNote, settings: Settings) -> dict:
    """Build the output dict: note metadata, dumped blocks, and resolved diagrams.

    Diagrams are keyed by the index of their figure block in `blocks`.
    """
    diagrams = {}
    for i, block in enumerate(note.blocks):
        if block.kind == BlockKindEnum.figure:
            asset = resolve_diagram(block, settings)
            if asset is not None:
                diagrams[str(i)] = asset.model_dump()
    data = note.model_dump(mode='json')
    data['diagrams'] = diagrams
    return data


def dump_sidecar(data: dict, fmt: str = 'json', indent: int = 2) -> str:
    """Serialize a sidecar dict as JSON or YAML text."""
    if fmt == 'yaml':
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False, indent=indent or None)
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def write_note(note: ExtractedNote, output_dir: Path, settings: Settings) -> Path:
    """Write a single note as output_dir / <slug>.<json|yaml>. Returns the written path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    fmt = settings.output_format
    out_path = output_dir / f"{note.slug}.{fmt}"
    out_path.write_text(dump_sidecar(build_sidecar(note, settings), fmt, settings.indent), encoding='utf-8')
    return out_path
