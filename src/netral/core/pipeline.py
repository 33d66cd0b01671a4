"""Flavor detection, file discovery, and parse orchestration"""

from pathlib import Path
from typing import Callable, Optional

from netral.core.models import Flavor, ParseResult, ParseStatus
from netral.core.parsers.deck import parse_deck_document
from netral.core.parsers.doc import parse_doc_document
from netral.core.parsers.site import parse_site_document
from netral.core.utils.slug import slugify


PARSERS: dict[Flavor, Callable] = {
    Flavor.block: parse_site_document,
    Flavor.deck: parse_deck_document,
    Flavor.doc: parse_doc_document,
}

EXTENSIONS = {flavor.extension: flavor for flavor in Flavor}


def detect_flavor(path: Path) -> Flavor:
    """Map a .netblock/.netdeck/.netdoc suffix onto its Flavor."""
    try:
        return EXTENSIONS[Path(path).suffix.lower()]
    except KeyError:
        raise ValueError(f"Unknown document type: {path} (expected one of {', '.join(EXTENSIONS)})") from None


def discover_files(path: Path) -> list[Path]:
    """Return sorted Netral files under path, or [path] if a single file."""
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.suffix.lower() in EXTENSIONS)


def parse_text(text: str, flavor: Flavor) -> ParseResult:
    """Parse text with the flavor's parser, recording every skipped fragment."""
    skipped: list[str] = []
    document = PARSERS[Flavor(flavor)](text, on_skip=skipped.append)
    return ParseResult(
        flavor=flavor,
        status=ParseStatus.partial if skipped else ParseStatus.complete,
        skipped=skipped,
        document=document,
    )


def parse_file(path: Path, flavor: Optional[Flavor] = None) -> ParseResult:
    """Read a UTF-8 source file and parse it; flavor defaults to the suffix's."""
    flavor = flavor or detect_flavor(path)
    return parse_text(path.read_text(encoding='utf-8'), flavor)


def run_parse(
    path: str,
    output_dir: Path,
    flavor: Optional[Flavor] = None,
    indent: int = 2,
    ) -> list[tuple[Path, Path, ParseResult]]:
    """Parse path and write one <slug>.json per file. Returns (source, output, result) triples."""
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    for p in discover_files(Path(path)):
        try:
            result = parse_file(p, flavor)
            out_file = output_dir / f"{slugify(p.stem, fallback='document')}.json"
            out_file.write_text(result.model_dump_json(indent=indent), encoding='utf-8')
            results.append((p, out_file, result))
        except Exception as e:
            raise RuntimeError(f"Failed to parse {p}: {e}") from e
    return results
