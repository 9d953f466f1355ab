"""Lightweight token-based JSON reading, editing and building.

Submodules: ``tokens`` (token types), ``lexer`` (text to tokens),
``document`` (the ``Json`` document and ``JsonBuilder``) and ``errors``.
"""

__version__ = "0.0.1"
__all__ = ["document", "errors", "lexer", "tokens"]