"""Main entry point for the scripter CLI when run as a module."""

from scripter.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
