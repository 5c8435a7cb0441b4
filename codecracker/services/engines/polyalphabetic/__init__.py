"""Polyalphabetic cipher solvers."""

from codecracker.services.engines.polyalphabetic.vigenere import VigenereSolver

__all__ = [
    "VigenereSolver",
]
