"""
Configuration Package
Provides centralized configuration for the parser and its LLM collaborators.
"""

from .settings import Settings, settings

__all__ = [
    'Settings',
    'settings',
]
