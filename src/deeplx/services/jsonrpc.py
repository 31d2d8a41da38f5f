from __future__ import annotations

import json
import random
import time
from typing import Optional, Union

from pydantic import ValidationError

from ..core.exceptions import BackendError, DecodeError
from ..schemas.deepl import DeepLErrorResponse, DeepLResponse, Lang, Params, PostData, Text

ID_RANGE = (8_300_000, 8_399_998)

DEEPL_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "*/*",
    "x-app-os-name": "iOS",
    "x-app-os-version": "16.3.0",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "x-app-device": "iPhone13,2",
    "User-Agent": "DeepL-iOS/2.9.1 iOS 16.3.0 (iPhone13,2)",
    "x-app-build": "510265",
    "x-app-version": "2.9.1",
    "Connection": "keep-alive",
}


def random_number_id() -> int:
    # randrange excludes the upper bound
    return random.randrange(*ID_RANGE) * 1000


def timestamp_for_i_count(i_count: int) -> int:
    timestamp = int(time.time() * 1000)
    if i_count != 0:
        i_count += 1
        return timestamp - timestamp % i_count + i_count
    return timestamp


def count_newlines(text: str) -> int:
    # Starts from zero on purpose; folding the clock into the count only inflates it
    return text.count("\n")


def build_post_data(
    text: str,
    source_lang: str,
    target_lang: str,
    *,
    request_id: Optional[int] = None,
    timestamp: Optional[int] = None,
) -> PostData:
    """Build the JSON-RPC envelope for a single text.

    ``request_id`` and ``timestamp`` are derived the way the DeepL apps do
    when they are not given.
    """
    if request_id is None:
        request_id = random_number_id()
    if timestamp is None:
        timestamp = timestamp_for_i_count(count_newlines(text))
    return PostData(
        id=request_id,
        params=Params(
            texts=[Text(text=text)],
            lang=Lang(source_lang_user_selected=source_lang, target_lang=target_lang),
            timestamp=timestamp,
        ),
    )


def dump_post_data(post_data: PostData) -> str:
    body = post_data.model_dump_json(by_alias=True)
    request_id = post_data.id
    if (request_id + 5) % 29 == 0 or (request_id + 3) % 13 == 0:
        return body.replace('"method":"', '"method" : "', 1)
    return body.replace('"method":"', '"method": "', 1)


def parse_response(payload: Union[bytes, str]) -> DeepLResponse:
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise DecodeError("Backend returned a body that is not JSON") from exc

    if isinstance(data, dict) and data.get("error") is not None:
        try:
            error = DeepLErrorResponse.model_validate(data).error
        except ValidationError as exc:
            raise DecodeError("Backend returned a malformed error object") from exc
        raise BackendError(
            f"Backend error {error.code}: {error.message}",
            body=payload.decode("utf-8", "replace") if isinstance(payload, bytes) else payload,
        )

    try:
        response = DeepLResponse.model_validate(data)
    except ValidationError as exc:
        raise DecodeError("Backend response does not match the expected shape") from exc
    if not response.result.texts:
        raise DecodeError("Backend response contains no translated text")
    return response
