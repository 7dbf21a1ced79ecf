"""
Okta Group Assignment Job
Assigns an Okta user to a group through the group membership API.
"""
__version__ = "1.0.0"

from .entrypoints import run_error_sync, run_halt_sync, run_invoke_sync
from .errors import (
    ConfigurationError,
    OktaAssignmentError,
    ProviderError,
    TransportError,
    ValidationError,
)
from .handler import error, halt, invoke
from .models import ExecutionContext

__all__ = [
    "invoke",
    "error",
    "halt",
    "run_invoke_sync",
    "run_error_sync",
    "run_halt_sync",
    "ExecutionContext",
    "OktaAssignmentError",
    "ValidationError",
    "ConfigurationError",
    "ProviderError",
    "TransportError",
]
