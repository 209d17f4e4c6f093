"""Advent of Code puzzle solutions and the tooling to run, time and submit them."""

__version__ = "0.11.0"