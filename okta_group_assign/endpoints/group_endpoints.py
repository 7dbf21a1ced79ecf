"""
Group membership endpoint of the Okta management API.
"""

from urllib.parse import quote

GROUP_MEMBERSHIP_PATH = "/api/v1/groups/{groupId}/users/{userId}"


def encode_segment(value: str) -> str:
    """Percent-encode a single path segment; nothing is left unescaped, `/` included."""
    return quote(value, safe="")


def build_base_url(okta_domain: str) -> str:
    return f"https://{okta_domain}"


def build_membership_path(group_id: str, user_id: str) -> str:
    return GROUP_MEMBERSHIP_PATH.format(
        groupId=encode_segment(group_id),
        userId=encode_segment(user_id),
    )


def build_membership_url(okta_domain: str, group_id: str, user_id: str) -> str:
    return f"{build_base_url(okta_domain)}{build_membership_path(group_id, user_id)}"
