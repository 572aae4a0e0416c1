"""Module entrypoint for ``python -m lazylauncher``."""

from .cli import main


if __name__ == "__main__":
    main()
