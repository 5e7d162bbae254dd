"""
API request and response models.

Binary host addresses are rendered as lowercase hex strings.
"""

from typing import Optional

from pydantic import BaseModel, Field

from uri_utils.models import ExtractionResult, ParsedURI


def _hex(value: Optional[bytes]) -> Optional[str]:
    return value.hex() if value is not None else None


class ParsedURIResponse(BaseModel):
    """Response for GET /v1/parse."""

    scheme: Optional[str] = Field(None, description="URI scheme")
    user_info: Optional[str] = Field(None, description="Decoded userinfo")
    host_type: Optional[str] = Field(
        None, description="One of named, ipv4, ipv6, ipfuture (null without authority)"
    )
    host_text: Optional[str] = Field(None, description="Host as text")
    ipv4: Optional[str] = Field(None, description="IPv4 address, 4 bytes as hex")
    ipv6: Optional[str] = Field(None, description="IPv6 address, 16 bytes as hex")
    ip_future: Optional[str] = Field(None, description="IPvFuture literal")
    port_text: Optional[str] = Field(None, description="Port exactly as written")
    path: list[str] = Field(default_factory=list, description="Decoded path segments")
    absolute_path: bool = Field(False, description="Whether the path began with '/'")
    query: Optional[str] = Field(None, description="Raw query string")
    fragment: Optional[str] = Field(None, description="Decoded fragment")
    key: Optional[list[str]] = Field(None, description="Decoded query keys")
    value: Optional[list[str]] = Field(None, description="Decoded query values")

    @classmethod
    def from_parsed(cls, parsed: ParsedURI) -> "ParsedURIResponse":
        return cls(
            scheme=parsed.scheme,
            user_info=parsed.user_info,
            host_type=parsed.host_type,
            host_text=parsed.host_text,
            ipv4=_hex(parsed.ipv4),
            ipv6=_hex(parsed.ipv6),
            ip_future=parsed.ip_future,
            port_text=parsed.port_text,
            path=list(parsed.path),
            absolute_path=parsed.absolute_path,
            query=parsed.query,
            fragment=parsed.fragment,
            key=list(parsed.keys) if parsed.keys is not None else None,
            value=list(parsed.values) if parsed.values is not None else None,
        )


class ExtractRequest(BaseModel):
    """Body for POST /v1/extract."""

    text: str = Field(..., description="Free text to scan for URIs")
    normalize: bool = Field(False, description="Normalize extracted components")


class ExtractionResponse(BaseModel):
    """Response for POST /v1/extract. All lists are index-aligned."""

    count: int = Field(..., description="Number of URIs found")
    scheme: list[str] = Field(default_factory=list)
    user_info: list[str] = Field(default_factory=list)
    host_text: list[str] = Field(default_factory=list)
    ipv4: list[str] = Field(default_factory=list, description="Hex, '' when unused")
    ipv6: list[str] = Field(default_factory=list, description="Hex, '' when unused")
    ip_future: list[str] = Field(default_factory=list)
    port_text: list[str] = Field(default_factory=list)
    path: list[str] = Field(default_factory=list, description="Unsplit, undecoded paths")
    query: list[str] = Field(default_factory=list)
    fragment: list[str] = Field(default_factory=list)
    absolute_path: list[bool] = Field(default_factory=list)
    uri: list[str] = Field(default_factory=list, description="URIs exactly as found")

    @classmethod
    def from_result(cls, result: ExtractionResult) -> "ExtractionResponse":
        return cls(
            count=len(result),
            scheme=result.scheme,
            user_info=result.user_info,
            host_text=result.host_text,
            ipv4=[address.hex() for address in result.ipv4],
            ipv6=[address.hex() for address in result.ipv6],
            ip_future=result.ip_future,
            port_text=result.port_text,
            path=result.path,
            query=result.query,
            fragment=result.fragment,
            absolute_path=result.absolute_path,
            uri=result.uri,
        )


class DomainResponse(BaseModel):
    """Response for GET /v1/domain/{domain}."""

    domain: str = Field(..., description="Domain as given")
    labels: list[str] = Field(default_factory=list, description="Dot-separated labels")
    registered_domain: Optional[str] = Field(None, description="eTLD+1, if any")
    public_suffix: Optional[str] = Field(None, description="Public suffix, if any")


class UsageResponse(BaseModel):
    """Response for GET /v1/usage/{function}."""

    function: str = Field(..., description="Entry point name")
    text: str = Field(..., description="Help text")
