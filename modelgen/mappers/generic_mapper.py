"""
Generic model generator.

Turns a list of arbitrary source records into a list of normalised target
models, driven by a declarative field-mapping table:

    {
        "id":    ["collectionId", "guid", "_id", "id"],
        "author": ["author", "user.name"],
    }

Each target field lists its candidate source keys in preference order.
A candidate containing ``.`` is a nested path.  The first candidate that
resolves to a defined value wins, even if that value is falsy or ``None``.

Nothing in here raises for bad input: unresolvable fields are omitted,
malformed candidate lists are skipped.  Errors raised by caller-supplied
transformers or post-process hooks propagate unchanged.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from modelgen.core.logging import get_logger
from modelgen.mappers.base_mapper import BaseMapper

logger = get_logger(__name__)

# Canonical list indexes only: "01", "-1" and non-ASCII digits do not match.
_INDEX_RE = re.compile(r"0|[1-9][0-9]*")


class _Undefined:
    """Marker for "no value resolved"; ``None`` is a real value."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()

Model = dict[str, Any]
FieldMapping = Mapping[str, Sequence[str]]
Transformer = Callable[[Any, Any], Any]
PostProcess = Callable[[Model, Any, int], Model]


@dataclass(frozen=True)
class TransformOptions:
    """
    Per-call knobs for ``generate_model``.

    Attributes:
        transformers: field name → ``(value, source_record) -> value``.
                      ``value`` is ``UNDEFINED`` when nothing resolved;
                      returning ``UNDEFINED`` drops the field.
        defaults:     partial model copied into every output before
                      field resolution.
        post_process: ``(model, source_record, index) -> model`` run once
                      per record after all fields are resolved.
    """

    transformers: Mapping[str, Transformer] = field(default_factory=dict)
    defaults: Mapping[str, Any] = field(default_factory=dict)
    post_process: PostProcess | None = None


# ── Public API ────────────────────────────────────────────────────────


def generate_model(
    records: Any,
    field_mapping: FieldMapping,
    options: TransformOptions | Mapping[str, Any] | None = None,
) -> list[Model]:
    """
    Generate one target model per source record.

    Args:
        records:       List (or tuple) of source records.  Anything else
                       yields an empty list.
        field_mapping: Target field → ordered candidate source keys.
        options:       ``TransformOptions`` or an equivalent mapping.

    Returns:
        List of models, same length and order as ``records``.
    """
    if not _is_sequence(records):
        return []

    opts = coerce_options(options)
    mapping = field_mapping if isinstance(field_mapping, Mapping) else {}

    logger.debug(
        "Generating models",
        extra={"record_count": len(records), "field_count": len(mapping)},
    )

    return [
        build_model(item, index, mapping, opts)
        for index, item in enumerate(records)
    ]


def coerce_options(
    options: TransformOptions | Mapping[str, Any] | None,
) -> TransformOptions:
    """Normalise ``None`` / plain mappings into ``TransformOptions``."""
    if isinstance(options, TransformOptions):
        return TransformOptions(
            transformers=_as_mapping(options.transformers),
            defaults=_as_mapping(options.defaults),
            post_process=options.post_process,
        )
    if not isinstance(options, Mapping):
        return TransformOptions()

    post_process = options.get("post_process", options.get("postProcess"))
    return TransformOptions(
        transformers=_as_mapping(options.get("transformers")),
        defaults=_as_mapping(options.get("defaults")),
        post_process=post_process,
    )


def resolve_field(item: Any, candidates: Any) -> Any:
    """
    Return the first defined value among ``candidates`` or ``UNDEFINED``.
    """
    if not _is_sequence(candidates):
        return UNDEFINED

    for key in candidates:
        if not isinstance(key, str):
            continue
        if "." in key:
            value = _resolve_path(item, key.split("."))
            if value is not UNDEFINED:
                return value
        elif isinstance(item, Mapping) and key in item:
            return item[key]

    return UNDEFINED


class GenericMapper(BaseMapper[Any, Model]):
    """Class-based wrapper binding a mapping table and options."""

    def __init__(
        self,
        field_mapping: FieldMapping,
        options: TransformOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._field_mapping = field_mapping
        self._options = coerce_options(options)

    def map_record(self, source: Any, index: int = 0) -> Model:
        return build_model(source, index, self._field_mapping, self._options)

    def map_many(self, sources: Any) -> list[Model]:
        return generate_model(sources, self._field_mapping, self._options)


def build_model(
    item: Any, index: int, mapping: FieldMapping, opts: TransformOptions
) -> Model:
    """Build the model for one record at position ``index``."""
    model: Model = dict(opts.defaults)

    for field_name, candidates in mapping.items():
        if not _is_sequence(candidates):
            continue

        value = resolve_field(item, candidates)

        if value is UNDEFINED and field_name == "id":
            value = index

        transformer = opts.transformers.get(field_name)
        if callable(transformer):
            value = transformer(value, item)

        if value is not UNDEFINED:
            model[field_name] = value

    if callable(opts.post_process):
        return opts.post_process(model, item, index)
    return model


# ── Internal ──────────────────────────────────────────────────────────


def _resolve_path(item: Any, parts: list[str]) -> Any:
    """Strict nested lookup; every segment must be present."""
    current = item
    for part in parts:
        if isinstance(current, Mapping):
            if part not in current:
                return UNDEFINED
            current = current[part]
        elif _is_sequence(current):
            if not _INDEX_RE.fullmatch(part) or int(part) >= len(current):
                return UNDEFINED
            current = current[int(part)]
        else:
            return UNDEFINED
    return current


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}
