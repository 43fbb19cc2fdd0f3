"""Main entry point for the scriptimport CLI when run as a module."""

from scriptimport.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
