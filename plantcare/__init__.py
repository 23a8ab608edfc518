"""Plant care backend: data model, AI and weather proxies, reminder scheduler."""

__version__ = "0.1.0"
