"""Run commands as a pipeline between an input file or here-document and an output file, with small string, number, buffer and output helpers."""

__version__ = "0.1.0"