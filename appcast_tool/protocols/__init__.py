"""
Protocols defining the provider interfaces.

Backends satisfy these protocols structurally, enabling type checking
without requiring inheritance.
"""

from .provider_protocol import SourceProvider, TargetProvider

__all__ = ["SourceProvider", "TargetProvider"]
