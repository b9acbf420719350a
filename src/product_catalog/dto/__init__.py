"""Data Transfer Objects for the gateway contract.

These Pydantic models mirror the proxy event and result shapes exchanged
with the API gateway.
"""

from .requests import ApiGatewayRequest, RequestContext
from .responses import ApiGatewayResponse

__all__ = [
    "ApiGatewayRequest",
    "ApiGatewayResponse",
    "RequestContext",
]
