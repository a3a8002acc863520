"""Allow ``python -m clin`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m clin`` behaves identically to the ``clin`` console script.
"""

from __future__ import annotations

from clin.cli.app import cli

if __name__ == "__main__":
    cli()
