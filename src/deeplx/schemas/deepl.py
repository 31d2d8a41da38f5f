"""Wire models for the DeepL JSON-RPC endpoint.

Field order matters: requests are serialised in declaration order and the
backend is sensitive to the exact shape of the body.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Lang(BaseModel):
    source_lang_user_selected: str = "auto"
    target_lang: str = "ZH"


class CommonJobParams(BaseModel):
    was_spoken: bool = False
    transcribe_as: str = ""


class Text(BaseModel):
    text: str = ""
    request_alternatives: int = 0


class Params(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    texts: List[Text] = Field(default_factory=lambda: [Text()])
    splitting: str = "newlines"
    lang: Lang = Field(default_factory=Lang)
    timestamp: int = 0
    common_job_params: CommonJobParams = Field(default_factory=CommonJobParams, alias="commonJobParams")


class PostData(BaseModel):
    jsonrpc: str = "2.0"
    method: str = "LMT_handle_texts"
    id: int = 0
    params: Params = Field(default_factory=Params)


class Alternative(BaseModel):
    text: str


class TranslatedText(BaseModel):
    text: str
    alternatives: List[Alternative] = Field(default_factory=list)


class DeepLResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    texts: List[TranslatedText]
    lang: str
    lang_is_confident: bool = False
    detected_languages: Dict[str, float] = Field(default_factory=dict, alias="detectedLanguages")


class JsonRpcError(BaseModel):
    code: int
    message: str = ""


class DeepLResponse(BaseModel):
    jsonrpc: str
    id: int
    result: DeepLResult


class DeepLErrorResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[int] = None
    error: JsonRpcError
