"""Development script to run checks (formatting, linting, tests) and a sample render."""

import argparse
import subprocess
import sys

SAMPLE_SOURCE = "tests/fixtures/showcase.rs"


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
    """Run the development checks and optionally render the sample source."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample render."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping main.py"
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
        run_command(["uv", "run", "pytest"], "Tests")
        print("\n✅ CI checks passed successfully. Skipping execution of main.py.")
        return

    run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
    run_command(
        ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
        "Ruff Linting & Fixes",
    )
    run_command(["uv", "run", "pytest"], "Tests")

    run_command(
        ["uv", "run", "python", "main.py", SAMPLE_SOURCE],
        "Main Entry Point",
    )

    print("\n✅ All development checks and the sample render passed successfully.")


if __name__ == "__main__":
    main()
