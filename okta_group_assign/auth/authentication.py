"""
Authentication handling for Okta API requests.
Okta API tokens are sent with the custom SSWS scheme.
"""

from typing import Dict, Optional

SSWS_PREFIX = "SSWS "


def normalize_token(api_token: str) -> str:
    """Return the token as an SSWS Authorization value, prefixing it once."""
    if api_token.startswith(SSWS_PREFIX):
        return api_token
    return f"{SSWS_PREFIX}{api_token}"


class OktaAuthenticator:
    """Builds the headers for SSWS-authenticated Okta API requests."""

    def __init__(self, api_token: Optional[str] = None):
        self.api_token: Optional[str] = None
        self.headers: Optional[Dict[str, str]] = None
        if api_token:
            self.set_api_token(api_token)

    def set_api_token(self, api_token: str):
        """Set SSWS API token for authentication."""
        self.api_token = api_token
        self.headers = None

    def get_headers(self) -> Dict[str, str]:
        """Get the request headers, building them on first use."""
        if not self.api_token:
            raise RuntimeError("No API token set on authenticator")

        if self.headers is None:
            self.headers = {
                "Authorization": normalize_token(self.api_token),
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        return self.headers
