"""School List - command-line client for the schools REST API."""

from app.cli import main

if __name__ == "__main__":
    main()
