"""
Pydantic schemas for the HTTP surface.
"""

from modelgen.schemas.transform_schema import (
    DataModelTransformRequest,
    GenericTransformRequest,
    ModelResponse,
    RemoteTransformRequest,
)

__all__ = [
    "DataModelTransformRequest",
    "GenericTransformRequest",
    "ModelResponse",
    "RemoteTransformRequest",
]
