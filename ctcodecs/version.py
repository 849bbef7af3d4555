"""Version resolution from installed package metadata."""

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _package_version


def _resolve_version(dist_name: str = "ctcodecs") -> str:
    try:
        return _package_version(dist_name)
    except _PackageNotFoundError:
        return "0.0.0"


__version__ = _resolve_version()


__all__ = ["__version__"]
