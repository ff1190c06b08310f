"""Utility exports."""

from .names import DEFAULT_PROFILE, is_valid_profile_name, validate_profile_name

__all__ = [
    "DEFAULT_PROFILE",
    "is_valid_profile_name",
    "validate_profile_name",
]
