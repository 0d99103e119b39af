"""Provision LXD containers with tool recipes via the lxc client, with an error code catalogue."""

__version__ = "1.0.1"
__all__ = ["__version__"]