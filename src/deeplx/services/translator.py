from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..core.config import Settings, get_settings
from ..core.exceptions import BackendError, DecodeError, InvalidInput, NetworkError
from ..schemas.deepl import DeepLResponse
from ..schemas.translate import TranslationRequest, TranslationResult
from .jsonrpc import DEEPL_HEADERS, build_post_data, dump_post_data, parse_response
from .language_utils import normalize_code, resolve_source_lang, resolve_target_lang

logger = logging.getLogger(__name__)

# Upper bound on how much of a failed response body is kept on the error
ERROR_BODY_LIMIT = 1000


async def _post(client: httpx.AsyncClient, url: str, body: str) -> httpx.Response:
    return await client.post(url, headers=DEEPL_HEADERS, content=body.encode("utf-8"))


async def deepl_translate(
    text: str,
    source_lang: str,
    target_lang: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> DeepLResponse:
    """Send one text to the DeepL JSON-RPC endpoint and return the decoded reply.

    Language codes are passed through as given. When no ``client`` is
    supplied a client is opened for this call only.
    """
    settings = settings or get_settings()
    post_data = build_post_data(text, source_lang, target_lang)
    body = dump_post_data(post_data)
    logger.debug(
        "DeepL request id=%s %s->%s (%d chars)",
        post_data.id, source_lang, target_lang, len(text),
    )

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.timeout_seconds) as own_client:
                response = await _post(own_client, settings.endpoint, body)
        else:
            response = await _post(client, settings.endpoint, body)
    except httpx.DecodingError as exc:
        logger.warning("DeepL response could not be decompressed: %s", exc)
        raise DecodeError(f"Failed to decode backend response: {exc}") from exc
    except httpx.RequestError as exc:
        logger.warning("DeepL request failed: %s: %s", type(exc).__name__, exc)
        raise NetworkError(f"Failed to reach translation backend: {exc}") from exc

    if response.status_code != httpx.codes.OK:
        logger.warning("DeepL responded with HTTP %s for id=%s", response.status_code, post_data.id)
        raise BackendError(
            f"Backend responded with HTTP {response.status_code}",
            status_code=response.status_code,
            body=response.text[:ERROR_BODY_LIMIT],
        )
    return parse_response(response.content)


async def translate(
    request: TranslationRequest,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> TranslationResult:
    settings = settings or get_settings()
    text = request.text
    if not text or not text.strip():
        raise InvalidInput("Text to translate is empty")
    if len(text) > settings.max_text_length:
        raise InvalidInput(
            f"Text too long ({len(text)} characters, max {settings.max_text_length})"
        )
    source_lang = resolve_source_lang(request.source_lang)
    target_lang = resolve_target_lang(request.target_lang)

    if source_lang == target_lang:
        return TranslationResult(
            translated_text=text,
            source_lang=source_lang,
            target_lang=target_lang,
        )

    response = await deepl_translate(
        text, source_lang, target_lang, client=client, settings=settings
    )
    result = response.result
    first = result.texts[0]
    if not first.text.strip():
        raise DecodeError("Backend returned an empty translation for non-empty text")
    return TranslationResult(
        translated_text=first.text,
        alternatives=[alt.text for alt in first.alternatives],
        source_lang=normalize_code(result.lang) or source_lang,
        target_lang=target_lang,
        request_id=response.id,
        detected_languages=result.detected_languages,
    )


async def translate_text(
    text: str,
    source_lang: str = "auto",
    target_lang: str = "ZH",
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    request = TranslationRequest(text=text, source_lang=source_lang, target_lang=target_lang)
    result = await translate(request, client=client, settings=settings)
    return result.translated_text
