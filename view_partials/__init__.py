"""View Partials - template partial rendering for the view layer"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("view-partials")
except PackageNotFoundError:
    __version__ = "dev"
