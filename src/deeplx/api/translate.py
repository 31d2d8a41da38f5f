import logging

import httpx
from fastapi import APIRouter, Depends

from ..core.config import Settings, get_settings
from ..core.http import get_http_client
from ..schemas.translate import TranslateResponse, TranslationRequest
from ..services.translator import translate

logger = logging.getLogger(__name__)

router = APIRouter(tags=['translate'])


@router.post('/translate', response_model=TranslateResponse)
async def translate_endpoint(
    request: TranslationRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    result = await translate(request, client=client, settings=settings)
    logger.info(
        "Translated %d chars %s->%s",
        len(request.text), result.source_lang, result.target_lang,
    )
    return TranslateResponse(
        id=result.request_id,
        data=result.translated_text,
        alternatives=result.alternatives,
        source_lang=result.source_lang,
        target_lang=result.target_lang,
    )
