"""Module entrypoint for ``python -m lazytree``.

All argument parsing and setup happen in ``lazytree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
