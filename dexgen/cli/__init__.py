"""Command line interface (``python -m dexgen.cli``)."""

from __future__ import annotations


def main(argv: list[str] | None = None) -> int:
    # imported lazily so ``python -m dexgen.cli`` does not load __main__ twice
    from .__main__ import main as _main

    return _main(argv)
