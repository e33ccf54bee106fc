"""Lanzador de craftdash para desarrollo.

Uso sin instalar el paquete:
- `python main.py list addons --json`

El paquete vive bajo `src/`; este script lo añade al path y delega en la CLI
(`cli.main.run`), el mismo callable que expone el script `craftdash`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # Terminales Windows en cp1252 rompen con los símbolos de Rich.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
