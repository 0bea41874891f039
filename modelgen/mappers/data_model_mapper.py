"""
Bookmark / article profile on top of the generic model generator.

Provides the well-known mapping table for feed- and bookmark-shaped
records (RSS items, Raindrop collections, CMS posts, ...) and decorates
every ``link`` with a referral query string.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from modelgen.core.logging import get_logger
from modelgen.mappers.base_mapper import BaseMapper
from modelgen.mappers.generic_mapper import (
    FieldMapping,
    Model,
    PostProcess,
    TransformOptions,
    build_model,
    coerce_options,
    generate_model,
)

logger = get_logger(__name__)

DEFAULT_REF_PARAM = "?ref=bookmarksfor.dev"

# Downstream consumers rely on this exact table.
DEFAULT_DATA_MODEL_MAPPING: dict[str, tuple[str, ...]] = {
    "id": ("collectionId", "guid", "_id", "id"),
    "title": ("title",),
    "domain": ("domain",),
    "author": ("author", "creator"),
    "description": ("description", "excerpt", "content", "summary"),
    "cover": ("cover", "image", "thumbnail"),
    "link": ("link", "url"),
    "lastUpdate": ("lastUpdate", "pubDate", "updated", "date"),
    "tags": ("tags", "categories", "keywords"),
    "value": ("value",),
}


@dataclass(frozen=True)
class DataModelTransformOptions(TransformOptions):
    """``TransformOptions`` plus the link-decoration knobs."""

    add_ref_to_link: bool = True
    ref_param: str = DEFAULT_REF_PARAM


def generate_data_model(
    records: Any,
    field_mapping: FieldMapping | None = None,
    options: DataModelTransformOptions | Mapping[str, Any] | None = None,
) -> list[Model]:
    """
    Generate bookmark-shaped models.

    Caller mapping entries replace the default candidate list of the field
    they name.  The built-in link decoration runs first; a caller
    ``post_process`` then receives the decorated model.
    """
    mapping = merge_field_mapping(field_mapping)
    opts = merge_options(options)

    logger.debug(
        "Applying data model profile",
        extra={
            "overridden_fields": sorted(
                k
                for k in mapping
                if tuple(mapping[k]) != DEFAULT_DATA_MODEL_MAPPING.get(k)
            ),
            "add_ref_to_link": opts.add_ref_to_link,
        },
    )

    return generate_model(records, mapping, _engine_options(opts))


def merge_field_mapping(overrides: FieldMapping | None) -> dict[str, Any]:
    """Default table with caller lists swapped in; non-list values ignored."""
    merged: dict[str, Any] = dict(DEFAULT_DATA_MODEL_MAPPING)
    if not isinstance(overrides, Mapping):
        return merged

    for field_name, candidates in overrides.items():
        if isinstance(candidates, (list, tuple)):
            merged[field_name] = list(candidates)
    return merged


def merge_options(
    options: DataModelTransformOptions | Mapping[str, Any] | None,
) -> DataModelTransformOptions:
    """Fill in profile defaults; transformer and default maps are copied."""
    base = coerce_options(options)
    merged = DataModelTransformOptions(
        transformers=dict(base.transformers),
        defaults=dict(base.defaults),
        post_process=base.post_process,
    )

    if isinstance(options, DataModelTransformOptions):
        return replace(
            merged,
            add_ref_to_link=options.add_ref_to_link,
            ref_param=options.ref_param,
        )
    if isinstance(options, Mapping):
        knobs: dict[str, Any] = {}
        add_ref = options.get("add_ref_to_link", options.get("addRefToLink"))
        ref_param = options.get("ref_param", options.get("refParam"))
        if add_ref is not None:
            knobs["add_ref_to_link"] = add_ref
        if ref_param is not None:
            knobs["ref_param"] = ref_param
        return replace(merged, **knobs)
    return merged


def decorate_link(model: Model, opts: DataModelTransformOptions) -> Model:
    """Append ``ref_param`` to a present, non-empty ``link``."""
    link = model.get("link")
    if link and opts.add_ref_to_link and opts.ref_param:
        return {**model, "link": f"{link}{opts.ref_param}"}
    return model


class DataModelMapper(BaseMapper[Any, Model]):
    """Class-based wrapper around ``generate_data_model``."""

    def __init__(
        self,
        field_mapping: FieldMapping | None = None,
        options: DataModelTransformOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._field_mapping = merge_field_mapping(field_mapping)
        self._options = merge_options(options)

    def map_record(self, source: Any, index: int = 0) -> Model:
        return build_model(
            source, index, self._field_mapping, _engine_options(self._options)
        )

    def map_many(self, sources: Any) -> list[Model]:
        return generate_model(
            sources, self._field_mapping, _engine_options(self._options)
        )


# ── Internal ──────────────────────────────────────────────────────────


def _engine_options(opts: DataModelTransformOptions) -> TransformOptions:
    return TransformOptions(
        transformers=opts.transformers,
        defaults=opts.defaults,
        post_process=_chain_post_process(opts),
    )


def _chain_post_process(opts: DataModelTransformOptions) -> PostProcess:
    user_hook = opts.post_process

    def post_process(model: Model, item: Any, index: int) -> Model:
        result = decorate_link(model, opts)
        if callable(user_hook):
            result = user_hook(result, item, index)
        return result

    return post_process
