"""Response DTOs for the product handlers."""

from pydantic import BaseModel, ConfigDict, Field


class ApiGatewayResponse(BaseModel):
    """Proxy result returned by a handler."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode", description="HTTP status code")
    body: str = Field(..., description="JSON-serialized response body")

    def to_event(self) -> dict:
        """Dump using the gateway's field names."""
        return self.model_dump(by_alias=True)
