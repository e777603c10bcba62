"""Entry point for 'python -m passgen' command."""

from passgen.cli import main

if __name__ == "__main__":
    main()
