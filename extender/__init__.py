"""Option and Result types, dict and list helpers, and value-guarding locks."""

__version__ = "0.1.0"
__all__ = ["option", "result", "maps", "slices", "locks"]