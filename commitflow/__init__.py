"""Local-model commit message generator with a collapsible diff viewer."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitflow")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
