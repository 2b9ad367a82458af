"""strenum -- generator for closed, string-valued Go enumerations."""

__version__ = "0.1.0"
