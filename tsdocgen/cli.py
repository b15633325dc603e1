"""Generate a static HTML documentation site from TypeScript sources.

Scrapes the exported declarations of every file matched by a glob pattern,
pairs each with its leading doc comment, and writes one page per declaration
plus an index page grouped by kind.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tsdocgen.errors import DocgenError
from tsdocgen.load_config import load_config
from tsdocgen.scraper import scrape
from tsdocgen.write_site import write_site

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the scrape and render pipeline."""
    config = load_config(args.config)
    if args.log_level:
        config["logging"]["level"] = args.log_level
    if args.include_empty_groups:
        config["render"]["include_empty_groups"] = True

    logging.basicConfig(
        level=str(config["logging"]["level"]).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    items = scrape(args.input)

    out_root = Path(args.out_dir or config["output_dir"])
    out_root.mkdir(parents=True, exist_ok=True)

    written = write_site(
        items,
        out_root,
        stylesheet=config["stylesheet"],
        include_empty=config["render"]["include_empty_groups"],
    )
    print(f"Generated {written} HTML pages into: {out_root.resolve()}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description="Generate static HTML docs from exported TypeScript declarations.",
    )
    ap.add_argument(
        "input",
        help="Glob pattern selecting source files, e.g. 'src/**/*.ts' (~ is expanded)",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        help="Output directory (default from config: output)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--include-empty-groups",
        action="store_true",
        help="Render index headings for kinds with no items",
    )
    ap.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default from config: INFO)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the documentation generator."""
    args = build_parser().parse_args(argv)
    try:
        return run_generation(args)
    except (DocgenError, OSError) as e:
        logger.error("Documentation generation failed: %s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
