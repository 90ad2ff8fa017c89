"""Entry point for `python -m mdsanitize` and `mdsanitize` CLI."""

from mdsanitize.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
