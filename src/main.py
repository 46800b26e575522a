"""Console-script target of `studentinfo-validate`.

Forces UTF-8 output on Windows before the CLI loads, since the PASS/ERROR
lines carry emoji.
"""

from __future__ import annotations

import sys

# cp1252 consoles on Windows cannot encode the report lines.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
