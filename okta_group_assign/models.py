"""Records exchanged between the job framework and the assignment handler."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

UNKNOWN = "unknown"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _frozen(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class ExecutionContext:
    secrets: Mapping[str, Any] = field(default_factory=dict)
    env: Mapping[str, Any] = field(default_factory=dict)
    outputs: Mapping[str, Any] = field(default_factory=dict)
    # Some callers re-invoke the error hook with the original params here.
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("secrets", "env", "outputs", "params"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    @classmethod
    def coerce(cls, context: Any) -> "ExecutionContext":
        """Accept an ExecutionContext, a mapping, or None."""
        if isinstance(context, cls):
            return context
        if context is None:
            return cls()
        if isinstance(context, Mapping):
            return cls(
                secrets=context.get("secrets") or {},
                env=context.get("env") or {},
                outputs=context.get("outputs") or {},
                params=context.get("params") or {},
            )
        return cls(
            secrets=getattr(context, "secrets", None) or {},
            env=getattr(context, "env", None) or {},
            outputs=getattr(context, "outputs", None) or {},
            params=getattr(context, "params", None) or {},
        )

    @property
    def api_token(self) -> Optional[str]:
        return self.secrets.get("OKTA_API_TOKEN")

    @property
    def environment(self) -> str:
        return str(self.env.get("ENVIRONMENT", UNKNOWN))


@dataclass(frozen=True)
class AssignmentRequest:
    user_id: str
    group_id: str
    okta_domain: str


@dataclass(frozen=True)
class AssignmentResult:
    user_id: str
    group_id: str
    okta_domain: str
    assigned_at: str
    assigned: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "groupId": self.group_id,
            "assigned": self.assigned,
            "oktaDomain": self.okta_domain,
            "assignedAt": self.assigned_at,
        }


@dataclass(frozen=True)
class HaltResult:
    user_id: str
    group_id: str
    reason: Optional[str]
    halted_at: str
    cleanup_completed: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "userId": self.user_id,
            "groupId": self.group_id,
            "reason": self.reason,
            "haltedAt": self.halted_at,
            "cleanupCompleted": self.cleanup_completed,
        }
