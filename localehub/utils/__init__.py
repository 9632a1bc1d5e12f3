"""Shared utilities for the localization API.

This package contains reusable helpers that are shared across
route modules.
"""

from localehub.utils.auth import token_required, issue_token

__all__ = [
    'token_required',
    'issue_token',
]
