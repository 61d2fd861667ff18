"""Group documented program entities into named, sorted sections."""

__version__ = "0.1.0"
