"""Allow running commitflow as `python -m commitflow`."""

from commitflow.cli import app

if __name__ == "__main__":
    app()
