"""Main entry point for AdeyLink."""

from adeylink.cli import main

if __name__ == "__main__":
    main()
