"""Best-effort text filters applied to user input at the boundary."""
from __future__ import annotations

import re
from typing import Any

# Applied in this order; later patterns assume the earlier ones already ran.
_SCRIPT_BLOCK = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]*>")
_JS_PROTOCOL = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)

_EMAIL_UNSAFE = re.compile(r"[<>\"'&]")
_PHONE_UNSAFE = re.compile(r"[^0-9\s\-()+]")


def sanitize_input(value: Any) -> str:
    """Strip script blocks, tags, ``javascript:`` URIs and inline handlers.

    This is a text filter, not an HTML parser. Non-string input yields an
    empty string.
    """

    if not isinstance(value, str):
        return ""

    cleaned = _SCRIPT_BLOCK.sub("", value)
    cleaned = _TAG.sub("", cleaned)
    cleaned = _JS_PROTOCOL.sub("", cleaned)
    cleaned = _EVENT_HANDLER.sub("", cleaned)
    return cleaned.strip()


def sanitize_email(value: Any) -> str:
    """Lower-case an email address and drop markup-significant characters."""

    if not isinstance(value, str):
        return ""
    return _EMAIL_UNSAFE.sub("", value.lower()).strip()


def sanitize_phone(value: Any) -> str:
    """Keep digits, whitespace and the ``+-()`` punctuation of phone numbers."""

    if not isinstance(value, str):
        return ""
    return _PHONE_UNSAFE.sub("", value).strip()
