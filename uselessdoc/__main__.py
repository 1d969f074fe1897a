"""Module entrypoint for running uselessdoc as ``python -m uselessdoc``."""

from __future__ import annotations

from uselessdoc.cli import main


if __name__ == "__main__":
    main()
