from __future__ import annotations

from ..core.exceptions import InvalidInput

AUTO_DETECT = "auto"

LANGUAGE_LABELS: dict[str, str] = {
    "AR": "Arabic",
    "BG": "Bulgarian",
    "CS": "Czech",
    "DA": "Danish",
    "DE": "German",
    "EL": "Greek",
    "EN": "English",
    "ES": "Spanish",
    "ET": "Estonian",
    "FI": "Finnish",
    "FR": "French",
    "HU": "Hungarian",
    "ID": "Indonesian",
    "IT": "Italian",
    "JA": "Japanese",
    "KO": "Korean",
    "LT": "Lithuanian",
    "LV": "Latvian",
    "NB": "Norwegian",
    "NL": "Dutch",
    "PL": "Polish",
    "PT": "Portuguese",
    "RO": "Romanian",
    "RU": "Russian",
    "SK": "Slovak",
    "SL": "Slovenian",
    "SV": "Swedish",
    "TR": "Turkish",
    "UK": "Ukrainian",
    "ZH": "Chinese",
}

SUPPORTED_LANG_CODES = set(LANGUAGE_LABELS.keys())

# Targets DeepL distinguishes by variant; any other region collapses to the base code
REGIONAL_TARGET_CODES = {"EN-GB", "EN-US", "PT-BR", "PT-PT", "ZH-HANS", "ZH-HANT"}


def full_code(code: str | None) -> str:
    if not code:
        return ""
    return code.strip().upper().replace("_", "-")


def normalize_code(code: str | None) -> str:
    return full_code(code).split("-")[0]


def language_label(code: str | None) -> str:
    normalized = normalize_code(code)
    if not normalized or normalized == AUTO_DETECT.upper():
        return "Detect language"
    return LANGUAGE_LABELS.get(normalized, code or normalized)


def resolve_source_lang(code: str | None) -> str:
    normalized = normalize_code(code)
    if not normalized or normalized == AUTO_DETECT.upper():
        return AUTO_DETECT
    if normalized not in SUPPORTED_LANG_CODES:
        raise InvalidInput(f"Unsupported source language: {code!r}")
    return normalized


def resolve_target_lang(code: str | None) -> str:
    normalized = normalize_code(code)
    if not normalized or normalized == AUTO_DETECT.upper():
        raise InvalidInput("Target language must be an explicit language code")
    if normalized not in SUPPORTED_LANG_CODES:
        raise InvalidInput(f"Unsupported target language: {code!r}")
    regional = full_code(code)
    if regional in REGIONAL_TARGET_CODES:
        return regional
    return normalized
