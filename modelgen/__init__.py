"""
modelgen — turn heterogeneous records into normalised models.

    from modelgen import generate_model, generate_data_model
"""

from modelgen.mappers.data_model_mapper import (
    DEFAULT_DATA_MODEL_MAPPING,
    DEFAULT_REF_PARAM,
    DataModelMapper,
    DataModelTransformOptions,
    generate_data_model,
)
from modelgen.mappers.generic_mapper import (
    UNDEFINED,
    GenericMapper,
    TransformOptions,
    generate_model,
)

__all__ = [
    "DEFAULT_DATA_MODEL_MAPPING",
    "DEFAULT_REF_PARAM",
    "DataModelMapper",
    "DataModelTransformOptions",
    "GenericMapper",
    "TransformOptions",
    "UNDEFINED",
    "generate_data_model",
    "generate_model",
]
