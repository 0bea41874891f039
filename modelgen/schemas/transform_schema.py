"""
Request / response bodies for the transform endpoints.

Only the envelope is validated; the records themselves are free-form and
go to the model generators untouched.
"""

from typing import Any

from pydantic import BaseModel, Field


class GenericTransformRequest(BaseModel):
    """Inline records mapped with a caller-supplied table."""

    records: list[Any] = Field(
        default_factory=list, description="Source records (any JSON values)")
    field_mapping: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Target field → ordered candidate keys (dot paths allowed)",
    )
    defaults: dict[str, Any] = Field(
        default_factory=dict, description="Values every model starts from")


class _ProfileOptions(BaseModel):
    """Profile knobs; ``None`` means "use the service setting"."""

    add_ref_to_link: bool | None = Field(
        default=None, description="Append ref_param to every link")
    ref_param: str | None = Field(
        default=None, description="Query-string suffix, e.g. '?ref=bookmarksfor.dev'")


class DataModelTransformRequest(GenericTransformRequest, _ProfileOptions):
    """Inline records mapped with the bookmark profile.

    ``field_mapping`` here only overrides individual profile fields.
    """


class RemoteTransformRequest(_ProfileOptions):
    """Fetch records from a URL, then map them with the bookmark profile."""

    url: str = Field(..., description="http(s) URL returning JSON")
    records_key: str | None = Field(
        default=None,
        description="Key (dot path allowed) holding the record list in an "
                    "object payload. Omit when the payload is a list.",
    )
    field_mapping: dict[str, list[str]] = Field(default_factory=dict)
    defaults: dict[str, Any] = Field(default_factory=dict)


class ModelResponse(BaseModel):
    """Envelope returned by every transform endpoint."""

    status: str = Field(default="ok")
    total_count: int = Field(default=0)
    records: list[dict[str, Any]] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
