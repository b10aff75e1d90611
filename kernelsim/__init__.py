"""Simulated kernel, CPU, memory and I/O programs with a small TCP message protocol."""

__version__ = "0.1.0"