"""Table change tracking pieces: JSON values, parsing and composing, patch documents, logging and a CSV table backend."""

__version__ = "0.1.0"
__all__ = ["values", "ops", "parse", "compose", "logger", "patch", "csvtable"]