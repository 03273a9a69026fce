"""Main entry script for resolving Hydra config references from a checkout."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from hydra_navigator.navigate import main as navigate_main


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}", file=sys.stderr)
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}", file=sys.stderr)
        sys.exit(e.returncode)


def main() -> int:
    """Optionally run the development checks, then the navigator."""
    parser = argparse.ArgumentParser(
        description="Resolve a Hydra config reference on one line of a YAML file.",
        epilog="Remaining arguments are passed to hydra_navigator.navigate.",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before resolving",
    )
    args, navigate_args = parser.parse_known_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---", file=sys.stderr)
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"], cwd=root_dir)

    if not navigate_args:
        return 0
    return navigate_main(navigate_args)


if __name__ == "__main__":
    raise SystemExit(main())
