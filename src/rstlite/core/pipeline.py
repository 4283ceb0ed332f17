"""Pipeline step: parse discovered files and export each Document as JSON"""

import logging
from pathlib import Path

from rstlite.core.parse import discover_files, parse_file
from rstlite.exceptions import PipelineError, RstliteError


logger = logging.getLogger(__name__)


def run_parse(
    path: str,
    output_dir: Path,
    encoding: str = 'utf-8',
    indent: int = 2,
    ) -> list[tuple[Path, Path]]:
    """Parse path and write <slug>.json per document to output_dir. Returns (source, output) pairs."""
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p in discover_files(Path(path)):
        try:
            parsed = parse_file(p, encoding)
        except (RstliteError, OSError, UnicodeDecodeError) as e:
            raise PipelineError(f"Failed to parse {p}: {e}") from e
        out_file = output_dir / f"{parsed.slug}.json"
        out_file.write_text(parsed.model_dump_json(indent=indent or None), encoding='utf-8')
        logger.info("Wrote %s -> %s", p, out_file)
        results.append((p, out_file))
    return results
