"""
linsys: entry point.

Analyze an augmented matrix given as JSON, e.g.::

    python main.py "[[1, 0, 5, 6], [0, 1, -3, 4]]"
"""

import argparse
import json
import logging
from typing import Optional

from linsys import Matrix, analyze_system, get_general_solution
from linsys.errors import LinsysError
from linsys.settings import get_settings


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("linsys")
    logger.setLevel(level)
    # Ensure at least one handler is present
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)


def main(argv: Optional[list] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Classify and solve a linear system given as an augmented matrix in echelon form"
    )
    parser.add_argument("matrix", help="Rows as a JSON list of lists, constants in the last column")
    parser.add_argument("--mode", choices=["symbolic", "numerical"],
                        default=settings["compute_mode"])
    parser.add_argument("--trail", action="store_true",
                        help="Print the full step-by-step trail as JSON")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    _configure_logging("DEBUG" if args.verbose else settings["log_level"])

    try:
        rows = json.loads(args.matrix)
        matrix = Matrix.from_rows(rows)
        if args.trail:
            result = analyze_system(matrix, compute_mode=args.mode,
                                    decimal_places=settings["decimal_places"])
            print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
        else:
            for line in get_general_solution(matrix, compute_mode=args.mode,
                                             decimal_places=settings["decimal_places"]):
                print(line)
    except json.JSONDecodeError as e:
        print(f"error: matrix is not valid JSON ({e})")
        return 1
    except LinsysError as e:
        print(f"error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
