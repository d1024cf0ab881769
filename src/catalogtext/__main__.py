"""Entry point for `python -m catalogtext` and `catalogtext` CLI."""

from catalogtext.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
