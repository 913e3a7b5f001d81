"""Module entrypoint for `python -m ghpush`.

This module enables running ghpush as a Python module using `python -m ghpush`.
It forwards to the same main() function as the console script.

Note:
    Prefer using the installed console script `ghpush` when available.
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
