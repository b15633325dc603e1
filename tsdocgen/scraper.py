"""Logic for scraping documentation items out of TypeScript source files."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from tsdocgen.classify_declaration import classify_declaration
from tsdocgen.doc_item import DocItem
from tsdocgen.parsed_module import ParsedModule
from tsdocgen.resolve_input_files import resolve_input_files
from tsdocgen.sanitize_doc_comment import sanitize_doc_comment
from tsdocgen.typescript_parser import parse_typescript

logger = logging.getLogger(__name__)

ParseFn = Callable[[str, Path], ParsedModule]


def scrape(pattern: str, parse: ParseFn = parse_typescript) -> list[DocItem]:
    """Scrape every file matched by ``pattern``.

    A malformed pattern or a file with a syntax error aborts the whole scrape.
    """
    paths = resolve_input_files(pattern)
    if not paths:
        logger.warning("No files matched pattern: %s", pattern)
    return scrape_paths(paths, parse)


def scrape_paths(
    paths: Iterable[Path], parse: ParseFn = parse_typescript
) -> list[DocItem]:
    """Scrape the given files in order, skipping entries that cannot be read."""
    items: list[DocItem] = []
    for path in paths:
        source = _read_source(path)
        if source is None:
            continue
        module = parse(source, path)
        before = len(items)
        items = scrape_module(module, items)
        logger.debug("Scraped %d items from %s", len(items) - before, path)
    logger.info("Scraped %d documentation items", len(items))
    return items


def scrape_module(module: ParsedModule, items: list[DocItem]) -> list[DocItem]:
    """Return ``items`` extended with the documentation items of ``module``."""
    found = list(items)
    for decl in module.declarations:
        comments = module.comments.leading(decl.start)
        # Only the closest comment block documents the declaration.
        description = sanitize_doc_comment(comments[0]) if comments else None
        found.extend(classify_declaration(decl, description))
    return found


def _read_source(path: Path) -> str | None:
    if path.is_dir():
        logger.warning("Skipping %s: is a directory", path)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping %s: %s", path, e)
        return None
