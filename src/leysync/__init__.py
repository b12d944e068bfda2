"""leysync - HoYoLAB Genshin account data to GOOD v3 converter."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("leysync")
except PackageNotFoundError:
    __version__ = "unknown"
