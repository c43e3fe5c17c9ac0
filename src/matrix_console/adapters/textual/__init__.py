"""Textual front-end for the matrix console."""

from .controller import TextualMatrixController, TextualUIHooks, translate_key

__all__ = ["TextualMatrixController", "TextualUIHooks", "translate_key"]
