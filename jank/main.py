from __future__ import annotations
import sys
from jank.app import run_app


def main() -> int:
    """Module entrypoint for `python -m jank.main` or `python -m jank`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
