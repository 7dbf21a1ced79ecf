"""
Authentication helpers for Okta API requests.
"""

from .authentication import SSWS_PREFIX, OktaAuthenticator, normalize_token

__all__ = ["SSWS_PREFIX", "OktaAuthenticator", "normalize_token"]
