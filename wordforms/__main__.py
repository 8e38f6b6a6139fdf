"""Entry point for ``python -m wordforms``."""

from .cli import main

if __name__ == "__main__":
    main()
