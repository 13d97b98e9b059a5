"""SignAvatar - stick-figure avatar that plays a sign for each chat message."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("signavatar")
except PackageNotFoundError:
    __version__ = "unknown"
