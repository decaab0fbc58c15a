"""gomaker -- scaffolds Go projects around a composed Makefile."""

__version__ = "0.1.0"
