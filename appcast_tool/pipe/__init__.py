"""
Pipe assembly.

Builds the ``Pipe`` handed to packaging and publishing code from a parsed
configuration tree.
"""

from .assembler import PipeAssembler

__all__ = ["PipeAssembler"]
