#!/usr/bin/env python3

"""Translate one sentence through the DeepL backend and print the raw reply."""

import asyncio
import sys

from deeplx.core.exceptions import TranslationError
from deeplx.services.translator import deepl_translate

DEFAULT_TEXT = "hello world"


async def main() -> int:
    text = " ".join(sys.argv[1:]) or DEFAULT_TEXT
    try:
        response = await deepl_translate(text, "EN", "ZH")
    except TranslationError as exc:
        print(f"Translation failed ({exc.code}, retryable={exc.retryable}): {exc}")
        return 1
    print(response.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
