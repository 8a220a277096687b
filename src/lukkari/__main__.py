"""Allow ``python -m lukkari`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m lukkari`` behaves identically to the ``lukkari`` console
script.
"""

from __future__ import annotations

from lukkari.cli.app import cli

if __name__ == "__main__":
    cli()
