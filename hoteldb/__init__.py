"""A file-backed hotel and room database with an interactive command shell."""

__version__ = "0.1.0"
__all__ = ["records", "table", "commands", "cli"]