"""Entry point for ``python -m findr``."""

from findr.cli.main import app

if __name__ == "__main__":
    app(prog_name="findr")
