"""Request DTOs for the product handlers."""

from pydantic import BaseModel, ConfigDict, Field


class RequestContext(BaseModel):
    """Gateway request context carrying trace identifiers."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    request_id: str | None = Field(None, alias="requestId", description="Gateway-assigned request id")


class ApiGatewayRequest(BaseModel):
    """Proxy request descriptor handed to a handler.

    Only the fields the handlers consume are modelled; anything else in the
    event is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    resource: str = Field("", description="Route template, e.g. /products/{id}")
    http_method: str = Field("", alias="httpMethod", description="HTTP method")
    path_parameters: dict[str, str] | None = Field(
        None,
        alias="pathParameters",
        description="Values for the placeholders of the route template",
    )
    body: str | None = Field(None, description="Raw request body, JSON-encoded product when present")
    request_context: RequestContext = Field(default_factory=RequestContext, alias="requestContext")

    @property
    def product_id(self) -> str | None:
        """The ``id`` path parameter, or None when absent."""
        if not self.path_parameters:
            return None
        return self.path_parameters.get("id")
