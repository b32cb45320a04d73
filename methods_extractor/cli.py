from __future__ import annotations

from methods_extractor.core import cli as _core_cli

app = _core_cli.app
extract = _core_cli.extract

__all__ = ["app", "extract"]

if __name__ == "__main__":
    app()
