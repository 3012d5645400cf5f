"""
octopus_client

Top-level package for the Octopus Deploy interruptions client.

Responsibilities:
- Expose package version metadata.
- Re-export the host client and the most commonly used types.
"""

from octopus_client.client import OctopusClient
from octopus_client.errors import (
    Cancelled,
    DecodeError,
    InvalidArgument,
    MissingLink,
    NotFound,
    OctopusClientError,
    TransportError,
)
from octopus_client.resources.models import (
    Interruption,
    InterruptionSubmitRequest,
    ListResponse,
    ResolutionKind,
    User,
)

__all__ = [
    "Cancelled",
    "DecodeError",
    "Interruption",
    "InterruptionSubmitRequest",
    "InvalidArgument",
    "ListResponse",
    "MissingLink",
    "NotFound",
    "OctopusClient",
    "OctopusClientError",
    "ResolutionKind",
    "TransportError",
    "User",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Re-exports only; keep this file free of import-time side effects (no logging setup).
