"""
Transform endpoints — map inline or remote records into models.

POST /transform/          bookmark profile, inline records
POST /transform/generic   generic engine, caller mapping table
POST /transform/remote    fetch a JSON source, then bookmark profile
"""

from fastapi import APIRouter, Depends

from modelgen.api.dependencies import get_transform_service
from modelgen.schemas.transform_schema import (
    DataModelTransformRequest,
    GenericTransformRequest,
    ModelResponse,
    RemoteTransformRequest,
)
from modelgen.services.transform_service import TransformService

router = APIRouter(prefix="/transform", tags=["Transform"])


@router.post(
    "/",
    response_model=ModelResponse,
    summary="Map records into bookmark models",
)
async def transform_data_model(
    req: DataModelTransformRequest,
    service: TransformService = Depends(get_transform_service),
) -> ModelResponse:
    return service.transform_data_model(
        req.records,
        field_mapping=req.field_mapping,
        defaults=req.defaults,
        add_ref_to_link=req.add_ref_to_link,
        ref_param=req.ref_param,
    )


@router.post(
    "/generic",
    response_model=ModelResponse,
    summary="Map records with a custom field-mapping table",
)
async def transform_generic(
    req: GenericTransformRequest,
    service: TransformService = Depends(get_transform_service),
) -> ModelResponse:
    return service.transform_generic(req.records, req.field_mapping, req.defaults)


@router.post(
    "/remote",
    response_model=ModelResponse,
    summary="Fetch records from a URL & map into bookmark models",
    description=(
        "Fetches JSON from the given URL, extracts the record list "
        "(optionally under records_key) and maps it with the bookmark profile."
    ),
)
async def transform_remote(
    req: RemoteTransformRequest,
    service: TransformService = Depends(get_transform_service),
) -> ModelResponse:
    return await service.transform_remote(
        req.url,
        records_key=req.records_key,
        field_mapping=req.field_mapping,
        defaults=req.defaults,
        add_ref_to_link=req.add_ref_to_link,
        ref_param=req.ref_param,
    )
