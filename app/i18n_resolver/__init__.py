"""Per-request message localization resolver."""

__version__ = "0.1.0"
