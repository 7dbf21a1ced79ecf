"""
Endpoint definitions for the Okta group membership API.
"""

from .group_endpoints import (
    GROUP_MEMBERSHIP_PATH,
    build_base_url,
    build_membership_path,
    build_membership_url,
    encode_segment,
)

__all__ = [
    "GROUP_MEMBERSHIP_PATH",
    "build_base_url",
    "build_membership_path",
    "build_membership_url",
    "encode_segment",
]
