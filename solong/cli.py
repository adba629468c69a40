"""Command line entry point: load, check and print a map."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .mapfile import MapError, has_ber_extension, load_map


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the map file named by the single argument and print it if valid."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stdout.write("Invalid number of arguments\n")
        return 1
    path = args[0]
    if not has_ber_extension(path):
        sys.stdout.write("Invalid map or file\n")
        return 1
    try:
        game_map = load_map(path)
    except MapError:
        sys.stdout.write("Invalid map or file\n")
        return 1
    try:
        game_map.validate()
    except MapError:
        sys.stdout.write("Invalid map\n")
        return 1
    sys.stdout.write(game_map.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())