"""Collapse bilingual *_ko / *_en fields into one field for the requested locale."""
from typing import Any

FALLBACK_LOCALE = "ko"


def localize(data: Any, locale: str) -> Any:
    """{"title_ko": "공지", "title_en": None} -> {"title": "공지"} for locale "en".

    Korean is the source language, so an empty translation falls back to it.
    Nested dicts and lists are localized too; other keys pass through unchanged.
    """
    if isinstance(data, list):
        return [localize(item, locale) for item in data]
    if not isinstance(data, dict):
        return data

    suffix = f"_{FALLBACK_LOCALE}"
    bases = {key[:-len(suffix)] for key in data if key.endswith(suffix)}
    localized = {}
    for key, value in data.items():
        base, _, tail = key.rpartition("_")
        if base in bases and len(tail) == 2:
            continue
        localized[key] = localize(value, locale)
    for base in bases:
        localized[base] = data.get(f"{base}_{locale}") or data.get(f"{base}{suffix}")
    return localized
