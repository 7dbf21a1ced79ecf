"""
Okta Assign User to Group job.

Assigns an Okta user to a group with a single PUT to the group membership
endpoint, and exposes the invoke/error/halt hooks called by the job framework.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .api_client import ApiClient, OktaResponse
from .endpoints import build_base_url, build_membership_path, build_membership_url
from .errors import ConfigurationError, ProviderError, ValidationError, is_rate_limited
from .models import UNKNOWN, AssignmentRequest, AssignmentResult, ExecutionContext, HaltResult, utc_timestamp

ApiClientFactory = Callable[[str, str], Any]

ASSIGNMENT_PARAMS = ("userId", "groupId", "oktaDomain")

# quote() leaves these intact and a normalizing proxy would collapse them.
DOT_SEGMENTS = (".", "..")

logger = logging.getLogger("okta_group_assign")
if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s - ASSIGN - %(levelname)s - %(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)


def _default_client_factory(base_url: str, api_token: str) -> ApiClient:
    return ApiClient(base_url, api_token)


def validate_request(params: Mapping[str, Any]) -> AssignmentRequest:
    """Check the assignment parameters in order; the first bad one raises."""
    for name in ASSIGNMENT_PARAMS:
        value = params.get(name)
        if not value or not isinstance(value, str):
            raise ValidationError(f"Invalid or missing {name} parameter")
        if name != "oktaDomain" and value in DOT_SEGMENTS:
            raise ValidationError(f"Invalid or missing {name} parameter")
    return AssignmentRequest(
        user_id=params["userId"],
        group_id=params["groupId"],
        okta_domain=params["oktaDomain"],
    )


def require_api_token(context: ExecutionContext) -> str:
    token = context.api_token
    if not token or not isinstance(token, str):
        raise ConfigurationError("Missing required secret: OKTA_API_TOKEN")
    return token


def _provider_error(response: OktaResponse) -> ProviderError:
    status_code = response.status
    message = f"Failed to assign user to group: HTTP {status_code}"
    error_code = error_summary = None

    try:
        error_body = response.json()
    except ValueError:
        logger.error("Failed to parse error response")
    else:
        logger.error(f"Okta API error response: {error_body}")
        if isinstance(error_body, dict):
            error_code = error_body.get("errorCode")
            error_summary = error_body.get("errorSummary")
            if error_summary:
                message = f"Failed to assign user to group: {error_summary}"

    return ProviderError(message, status_code=status_code, error_code=error_code, error_summary=error_summary)


async def assign_user_to_group(
    request: AssignmentRequest,
    api_token: str,
    api_client_factory: ApiClientFactory = _default_client_factory,
) -> AssignmentResult:
    """Send the membership PUT and translate the response."""
    endpoint = build_membership_path(request.group_id, request.user_id)
    logger.debug(f"PUT {build_membership_url(request.okta_domain, request.group_id, request.user_id)}")

    async with api_client_factory(build_base_url(request.okta_domain), api_token) as client:
        response = await client.put(endpoint)

    if not response.ok:
        raise _provider_error(response)

    # 204 No Content is the expected success response
    logger.info(f"Successfully assigned user {request.user_id} to group {request.group_id}")
    return AssignmentResult(
        user_id=request.user_id,
        group_id=request.group_id,
        okta_domain=request.okta_domain,
        assigned_at=utc_timestamp(),
    )


async def _run_assignment(
    params: Mapping[str, Any],
    context: ExecutionContext,
    api_client_factory: ApiClientFactory,
) -> AssignmentResult:
    request = validate_request(params)
    api_token = require_api_token(context)
    return await assign_user_to_group(request, api_token, api_client_factory)


async def invoke(
    params: Mapping[str, Any],
    context: Any,
    api_client_factory: ApiClientFactory = _default_client_factory,
) -> Dict[str, Any]:
    """Assign params["userId"] to params["groupId"] on params["oktaDomain"]."""
    context = ExecutionContext.coerce(context)
    logger.info(
        f"Starting Okta user group assignment: user {params.get('userId')} "
        f"to group {params.get('groupId')} (environment: {context.environment})"
    )
    result = await _run_assignment(params, context, api_client_factory)
    return result.to_dict()


def _recovery_params(params: Mapping[str, Any], context: ExecutionContext) -> Dict[str, Any]:
    """Original assignment params, read from params first, then context.params."""
    resolved: Dict[str, Any] = {}
    for name in ASSIGNMENT_PARAMS:
        value = params.get(name)
        if value is None:
            value = context.params.get(name)
        resolved[name] = value
    return resolved


async def error(
    params: Mapping[str, Any],
    context: Any,
    api_client_factory: ApiClientFactory = _default_client_factory,
) -> Dict[str, Any]:
    """
    Recover from a failed invoke.

    Rate-limit errors get exactly one immediate retry; anything else is
    re-raised unchanged so the framework can apply its own retry policy.
    """
    context = ExecutionContext.coerce(context)
    failure: Optional[BaseException] = params.get("error")
    if not isinstance(failure, BaseException):
        raise ValidationError("Invalid or missing error parameter")

    original = _recovery_params(params, context)
    logger.error(
        f"User group assignment failed for user {original['userId']} "
        f"to group {original['groupId']}: {failure}"
    )

    if not is_rate_limited(failure):
        raise failure

    logger.info("Rate limit reported, retrying assignment once")
    await _run_assignment(original, context, api_client_factory)
    return {"recovered": True}


async def halt(params: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """Acknowledge a halt. The PUT either completed or it didn't, so nothing is unwound."""
    reason = params.get("reason")
    user_id = params.get("userId") or UNKNOWN
    group_id = params.get("groupId") or UNKNOWN
    logger.info(f"User group assignment job is being halted ({reason}) for user {user_id} to group {group_id}")

    return HaltResult(
        user_id=user_id,
        group_id=group_id,
        reason=reason,
        halted_at=utc_timestamp(),
    ).to_dict()
