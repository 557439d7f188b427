"""People catalog API built from a directory of images."""

__version__ = "1.0.0"
