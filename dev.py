"""Development script to run checks (linting, types, tests) and the generator."""

import argparse
import subprocess
import sys

CHECKS: list[tuple[list[str], str]] = [
    (["uv", "run", "ruff", "check", "."], "Ruff Linting"),
    (["uv", "run", "ruff", "format", "--check", "."], "Ruff Format Check"),
    (["uv", "run", "mypy", "tsdocgen"], "Mypy Type Check"),
    (["uv", "run", "pytest", "-q"], "Pytest"),
]


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally the main script."""
    parser = argparse.ArgumentParser(
        description="Run development checks and main script."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping main.py"
    )
    args = parser.parse_args()

    if not args.ci:
        # Run auto-formatting and fixing
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
            "Ruff Linting & Fixes",
        )

    for command, step_name in CHECKS:
        run_command(command, step_name)

    if args.ci:
        print("\n✅ CI checks passed successfully. Skipping execution of main.py.")
        return

    run_command(
        ["uv", "run", "python", "main.py", "src/**/*.ts"],
        "Main Entry Point",
    )

    print("\n✅ All development checks and main script passed successfully.")


if __name__ == "__main__":
    main()
