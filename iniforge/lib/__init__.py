"""Parsing, interpolation, I/O and logging internals."""
