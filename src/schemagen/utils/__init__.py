"""
SchemaGen utilities.
"""

from schemagen.utils.defaults import DEFAULT_DEV, DEFAULT_PROD, DefaultsProfile, get_profile

__all__ = [
    "DefaultsProfile",
    "DEFAULT_PROD",
    "DEFAULT_DEV",
    "get_profile",
]
