"""Delimited-text streams, mustache-style template building blocks and formatted error reporting."""

__version__ = "0.1.0"
__all__ = ["minicsv", "template_token", "template_nodes", "formatting"]