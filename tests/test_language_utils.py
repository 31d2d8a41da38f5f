import pytest

from deeplx.core.exceptions import InvalidInput
from deeplx.services.language_utils import (
    AUTO_DETECT,
    language_label,
    normalize_code,
    resolve_source_lang,
    resolve_target_lang,
)


def test_normalize_code():
    assert normalize_code("en-us") == "EN"
    assert normalize_code(" zh ") == "ZH"
    assert normalize_code("PT-BR") == "PT"
    assert normalize_code(None) == ""
    assert normalize_code("") == ""
    assert normalize_code("en_US") == "EN"


def test_language_label():
    assert language_label("zh") == "Chinese"
    assert language_label("auto") == "Detect language"
    assert language_label("xx") == "xx"


@pytest.mark.parametrize("code", [None, "", "auto", "AUTO", " Auto "])
def test_source_accepts_auto_sentinel(code):
    assert resolve_source_lang(code) == AUTO_DETECT


def test_source_normalizes_known_code():
    assert resolve_source_lang("en-GB") == "EN"
    assert resolve_source_lang("en_GB") == "EN"


def test_source_rejects_unknown_code():
    with pytest.raises(InvalidInput):
        resolve_source_lang("klingon")


def test_target_normalizes_known_code():
    assert resolve_target_lang("ja") == "JA"


@pytest.mark.parametrize("code", [None, "", "auto", "tlh"])
def test_target_rejects_auto_and_unknown(code):
    with pytest.raises(InvalidInput):
        resolve_target_lang(code)


@pytest.mark.parametrize(
    "code,expected",
    [("pt-br", "PT-BR"), ("PT_PT", "PT-PT"), ("en-us", "EN-US"), ("zh-hans", "ZH-HANS"), ("en_AU", "EN"), ("de-AT", "DE")],
)
def test_target_keeps_supported_regional_variant(code, expected):
    assert resolve_target_lang(code) == expected


def test_target_rejects_unknown_base_with_region():
    with pytest.raises(InvalidInput):
        resolve_target_lang("xx-YY")
