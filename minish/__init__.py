"""A minimal command shell with PATH lookup, env and exit built-ins, and process info."""

__version__ = "0.1.0"