"""CRUD Admin view layer"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("crud-admin")
except PackageNotFoundError:
    __version__ = "dev"
