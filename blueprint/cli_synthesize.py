from __future__ import annotations

import argparse
from pathlib import Path

from blueprint.loaders import load_upload
from blueprint.workspace import BlueprintWorkspace
from common.config import yaml_config
from common.logger import get_logger
from common.settings import settings

log = get_logger(__name__)


def synthesize(
    ir_path: Path | None,
    kcs_path: Path | None,
    out_dir: Path,
    chunk_size: int | None = None,
    fmt: str | None = None,
) -> list[Path]:
    """
    Build the ruleset Markdown and knowledge chunks from local files and
    write them to `out_dir`. Returns the written paths.
    """
    ws = BlueprintWorkspace(recompute_on_write=False)
    requested = chunk_size or yaml_config.blueprint.chunk_size
    size = ws.set_chunk_size(requested)
    if size != requested:
        log.warning("Chunk size %s is outside the allowed range, using %d", requested, size)
    ws.set_format(fmt or yaml_config.blueprint.default_format)

    for target, path in (("ir", ir_path), ("kcs", kcs_path)):
        if path is None:
            continue
        text = load_upload(path)
        if text is not None:
            ws.append_upload(target, text)

    ws.snapshot()
    written: list[Path] = []
    artifacts = (
        ws.export_ir() if ir_path else None,
        ws.export_kcs() if kcs_path else None,
    )
    for artifact in artifacts:
        if artifact is not None:
            written.append(artifact.write(out_dir))

    bp = ws.blueprint
    log.info(
        "Synthesized %d chunks (avg %d tokens, chunk size %d)",
        len(bp.kcs_chunks),
        ws.average_tokens(),
        bp.chunk_size,
    )
    return written


def main():
    parser = argparse.ArgumentParser(
        description="Convert an instructional ruleset to Markdown and a knowledge compendium to chunks."
    )
    parser.add_argument("--ir", type=str, default="", help="Instructional ruleset text file")
    parser.add_argument("--kcs", type=str, default="", help="Knowledge compendium text file")
    parser.add_argument(
        "--chunk_size",
        type=int,
        default=yaml_config.blueprint.chunk_size,
        help="Target characters per chunk",
    )
    parser.add_argument(
        "--format",
        type=str,
        default=yaml_config.blueprint.default_format,
        choices=["json", "jsonl"],
    )
    parser.add_argument("--out_dir", type=str, default=str(settings.export_dir))
    args = parser.parse_args()

    ir_path = Path(args.ir) if args.ir else None
    kcs_path = Path(args.kcs) if args.kcs else None
    inputs = [p for p in (ir_path, kcs_path) if p is not None]

    if not inputs:
        log.error("Nothing to do: pass --ir and/or --kcs")
        raise SystemExit(1)
    for p in inputs:
        if not p.exists():
            log.error("Input file does not exist: %s", p)
            raise SystemExit(1)

    synthesize(ir_path, kcs_path, Path(args.out_dir), args.chunk_size, args.format)


if __name__ == "__main__":
    main()
