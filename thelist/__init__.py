"""The List: a tiny durable list of names."""

__version__ = "0.1.0"
