"""Infrastructure Layer: database handle, store primitives, logging setup."""
