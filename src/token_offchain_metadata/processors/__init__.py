"""
Token list document processing.
"""

from .token_list_validation import (
    BridgeTarget,
    TokenExtensions,
    TokenInfo,
    TokenList,
    TokenListValidationResult,
    TokenListVersion,
    ValidationIssue,
    validate_token_list,
)

__all__ = [
    "BridgeTarget",
    "TokenExtensions",
    "TokenInfo",
    "TokenList",
    "TokenListValidationResult",
    "TokenListVersion",
    "ValidationIssue",
    "validate_token_list",
]
