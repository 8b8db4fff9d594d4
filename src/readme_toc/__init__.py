"""readme-toc - keep a generated docs table of contents inside a README."""

from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("readme-toc")
except PackageNotFoundError:  # pragma: no cover
    # When running from a source checkout without an installed distribution.
    __version__ = "0.0.0"

__all__ = ["__version__"]
