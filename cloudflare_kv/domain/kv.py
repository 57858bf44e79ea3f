"""
Workers KV Domain Model

Defines client configuration, per-call options and API response envelopes.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cloudflare_kv.config import DEFAULT_API_BASE_URL


class CloudflareKVOptions(BaseModel):
    """Client Configuration (immutable)"""

    account_id: str = Field(..., description="Account ID")
    namespace_id: str = Field(..., description="Default Namespace ID")
    access_token: str = Field(..., description="API Token")
    base_url: str = Field(DEFAULT_API_BASE_URL, description="API Base URL")
    timeout: Optional[float] = Field(None, description="Request Timeout (seconds)")

    model_config = ConfigDict(frozen=True)


class MethodOptions(BaseModel):
    """Options shared by every call"""

    namespace_id: Optional[str] = Field(None, description="Namespace ID override")

    model_config = ConfigDict(extra="forbid")


class ListOptions(MethodOptions):
    """List Keys Options"""

    # Number of keys to return; use the returned cursor to fetch the next batch
    limit: Optional[int] = Field(None, ge=1, description="Page Size")
    # Opaque position token taken from result_info.cursor of a previous page
    cursor: Optional[str] = Field(None, description="Pagination Cursor")
    # Exact matches and any key names beginning with the prefix are returned
    prefix: Optional[str] = Field(None, description="Key Prefix")


class SetOptions(MethodOptions):
    """
    Write Value Options

    If neither expiration nor expiration_ttl is given the pair never expires.
    When both are given, expiration_ttl wins.
    """

    expiration: Optional[int] = Field(None, description="Absolute Expiration (epoch seconds)")
    expiration_ttl: Optional[Union[int, str]] = Field(
        None, description="TTL in seconds, or a duration string such as '10m'"
    )


class MethodResponse(BaseModel):
    """API Response Envelope"""

    success: bool = Field(False, description="Whether the call succeeded")
    errors: list[Any] = Field(default_factory=list, description="Error Objects")
    messages: list[Any] = Field(default_factory=list, description="Informational Messages")

    model_config = ConfigDict(extra="allow")

    @field_validator("errors", "messages", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class KeyInfo(BaseModel):
    """Key Record returned by list"""

    name: str = Field(..., description="Key Name")
    expiration: Optional[int] = Field(None, description="Expiration (epoch seconds)")
    # Arbitrary JSON attached to the key at write time
    metadata: Any = Field(None, description="Key Metadata")

    model_config = ConfigDict(extra="allow")


class ResultInfo(BaseModel):
    """Pagination Info"""

    count: Optional[int] = Field(None, description="Number of keys in this page")
    cursor: Optional[str] = Field(None, description="Cursor for the next page, empty or null on the last page")

    model_config = ConfigDict(extra="allow")


class ListResponse(MethodResponse):
    """List Keys Response"""

    result: list[KeyInfo] = Field(default_factory=list, description="Keys")
    result_info: Optional[ResultInfo] = Field(None, description="Pagination Info")

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, value: Any) -> Any:
        # Error envelopes carry "result": null
        return [] if value is None else value
