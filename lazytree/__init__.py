"""Public package surface for lazytree.

Exports ``main`` for programmatic CLI invocation.
The tree model lives in ``lazytree.tree_model`` and backends in
``lazytree.backends``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "__version__"]
