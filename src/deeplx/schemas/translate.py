from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class TranslationRequest(BaseModel):
    text: str
    source_lang: str = "auto"
    target_lang: str = "ZH"


class TranslationResult(BaseModel):
    translated_text: str
    alternatives: List[str] = Field(default_factory=list)
    source_lang: str
    target_lang: str
    request_id: Optional[int] = None
    detected_languages: Dict[str, float] = Field(default_factory=dict)


class TranslateResponse(BaseModel):
    code: int = 200
    id: Optional[int] = None
    data: str
    alternatives: List[str] = Field(default_factory=list)
    source_lang: str
    target_lang: str
    method: str = "Free"
