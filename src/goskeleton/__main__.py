"""Allow ``python -m goskeleton``."""

from goskeleton.cli import app


if __name__ == "__main__":
    app(prog_name="goskeleton")
