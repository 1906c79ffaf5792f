"""Module entrypoint for ``python -m ansipad``.

All argument parsing happens in ``ansipad.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
