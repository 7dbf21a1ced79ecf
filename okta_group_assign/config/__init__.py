"""
Configuration management for the Okta group assignment job.
"""

from .config_loader import ConfigLoader

__all__ = ["ConfigLoader"]
