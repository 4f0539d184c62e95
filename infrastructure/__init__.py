"""
Infrastructure Package.

Boundary concerns shared with the (external) RPC layer.

Exports:
    validate_aurora_address: Normalize and validate a scheduler address
"""

from .validators import validate_aurora_address

__all__ = ['validate_aurora_address']
