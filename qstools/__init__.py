"""Helpers for an object-storage command line client: sizes, part sizes, paths,
aligned output, prompts, logging and message catalogues."""

__version__ = "0.1.0"