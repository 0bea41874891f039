"""
Transform service — glues record sources to the model generators.

Used by the HTTP routes; request knobs left unset fall back to the
service settings.
"""

from typing import Any

from modelgen.config import Settings
from modelgen.core.logging import get_logger
from modelgen.mappers.data_model_mapper import (
    DataModelTransformOptions,
    generate_data_model,
)
from modelgen.mappers.generic_mapper import TransformOptions, generate_model
from modelgen.schemas.transform_schema import ModelResponse
from modelgen.services.source_client import SourceClient

logger = get_logger(__name__)


class TransformService:
    """Map inline or remote records into models."""

    def __init__(self, source_client: SourceClient, settings: Settings) -> None:
        self._source_client = source_client
        self._settings = settings

    def transform_generic(
        self,
        records: list[Any],
        field_mapping: dict[str, list[str]],
        defaults: dict[str, Any] | None = None,
    ) -> ModelResponse:
        """Run the generic engine with a caller-supplied mapping table."""
        models = generate_model(
            records, field_mapping, TransformOptions(defaults=defaults or {})
        )
        logger.info(
            "Generic transform complete",
            extra={"source_count": len(records), "model_count": len(models)},
        )
        return ModelResponse(
            total_count=len(models),
            records=models,
            metadata={"fields": list(field_mapping)},
        )

    def transform_data_model(
        self,
        records: list[Any],
        field_mapping: dict[str, list[str]] | None = None,
        defaults: dict[str, Any] | None = None,
        add_ref_to_link: bool | None = None,
        ref_param: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> ModelResponse:
        """Run the bookmark profile, honouring the configured link knobs."""
        options = self._profile_options(defaults, add_ref_to_link, ref_param)
        models = generate_data_model(records, field_mapping, options)

        logger.info(
            "Data model transform complete",
            extra={
                "source_count": len(records),
                "model_count": len(models),
                "overridden_fields": sorted(field_mapping or {}),
            },
        )
        return ModelResponse(
            total_count=len(models),
            records=models,
            metadata={
                **(metadata or {}),
                "add_ref_to_link": options.add_ref_to_link,
                "ref_param": options.ref_param,
            },
        )

    async def transform_remote(
        self,
        url: str,
        records_key: str | None = None,
        field_mapping: dict[str, list[str]] | None = None,
        defaults: dict[str, Any] | None = None,
        add_ref_to_link: bool | None = None,
        ref_param: str | None = None,
    ) -> ModelResponse:
        """End-to-end: fetch → profile map → return."""
        records = await self._source_client.fetch_records(url, records_key)
        return self.transform_data_model(
            records,
            field_mapping=field_mapping,
            defaults=defaults,
            add_ref_to_link=add_ref_to_link,
            ref_param=ref_param,
            metadata={"url": url, "records_key": records_key},
        )

    # ── Private helpers ───────────────────────────────────────────────

    def _profile_options(
        self,
        defaults: dict[str, Any] | None,
        add_ref_to_link: bool | None,
        ref_param: str | None,
    ) -> DataModelTransformOptions:
        return DataModelTransformOptions(
            defaults=defaults or {},
            add_ref_to_link=(
                self._settings.add_ref_to_link
                if add_ref_to_link is None
                else add_ref_to_link
            ),
            ref_param=self._settings.link_ref_param if ref_param is None else ref_param,
        )
