"""Main orchestration script for generating the TypeScript documentation site."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate an HTML documentation site from TypeScript sources."
    )
    parser.add_argument(
        "input",
        help="Glob pattern selecting the TypeScript files to document",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating documentation",
    )
    parser.add_argument(
        "--out-dir",
        help="Output directory for the generated site",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent
    python_exe = sys.executable

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([python_exe, str(root_dir / "dev.py"), "--ci"])
        print(
            "\n✅ Development checks passed. "
            "Proceeding with documentation generation.\n"
        )

    print("--- Generating HTML documentation ---")
    cmd = [python_exe, "-m", "tsdocgen.cli", args.input]
    if args.out_dir:
        cmd.extend(["--out-dir", args.out_dir])
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print("\nSUCCESS: Documentation generated")


if __name__ == "__main__":
    main()
