"""Invocation context domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InvocationContext:
    """Trace identifiers assigned by the runtime to one invocation.

    Attributes:
        request_id: The runtime-assigned invocation id (logged only)
    """

    request_id: str | None = None

    @classmethod
    def from_lambda_context(cls, context: Any) -> "InvocationContext":
        """Build from a Lambda-style context object exposing ``aws_request_id``."""
        return cls(request_id=getattr(context, "aws_request_id", None))
