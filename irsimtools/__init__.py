"""Generators for IRSIM command files and net-name input lists."""

__version__ = "0.1.0"