"""Entry point for easychangedirectory."""

import argparse
import sys
from pathlib import Path

from .app import run_app
from .config import Config
from .log import setup_logging
from .session import Action, write_temp_path

SHELL_INIT = {
    "bash": """\
ed() {
  local tmp
  tmp="$(mktemp)"
  easychangedirectory "$tmp" "$@"
  if [ -s "$tmp" ]; then
    cd -- "$(cat "$tmp")" || return
  fi
  rm -f -- "$tmp"
}
""",
    "fish": """\
function ed
    set -l tmp (mktemp)
    easychangedirectory $tmp $argv
    if test -s $tmp
        cd (cat $tmp)
    end
    rm -f $tmp
end
""",
}
SHELL_INIT["zsh"] = SHELL_INIT["bash"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="easychangedirectory",
        description="Browse the filesystem in the terminal and change to a directory.",
    )
    parser.add_argument(
        "temp_path",
        nargs="?",
        type=Path,
        help="file to write the chosen directory to (used by the shell function)",
    )
    parser.add_argument(
        "--init",
        choices=sorted(SHELL_INIT),
        metavar="SHELL",
        help="print the shell function for SHELL (bash, zsh or fish) and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for easychangedirectory."""
    args = build_parser().parse_args(argv)

    if args.init:
        print(SHELL_INIT[args.init], end="")
        return 0

    try:
        config = Config.load()
        log_path = setup_logging(config)

        result = run_app(config)

        if result.action is Action.PRINT:
            print(result.path)
        if args.temp_path is not None:
            write_temp_path(result, args.temp_path)

        if config.show_pwd:
            print(f"Now: {result.path}")
        if log_path is not None:
            print(f"Log output location: {log_path}")

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
