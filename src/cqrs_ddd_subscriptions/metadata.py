"""Sanitization of per-notification metadata merged into mail render data."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any

REDACTED = "***"

_DEFAULT_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "signature",
        "unsubscribe_token",
        "authorization",
    }
)


class MetadataSanitizer:
    """
    Keeps secrets out of the data mapping handed to templates and mailers.

    Keys are matched case-insensitively. Sensitive keys are replaced with
    ``***``; keys listed in ``hash_keys`` are replaced with a SHA-256 digest
    so they stay correlatable without being readable.
    """

    def __init__(
        self,
        *,
        sensitive_keys: set[str] | None = None,
        hash_keys: set[str] | None = None,
    ) -> None:
        keys = sensitive_keys if sensitive_keys is not None else _DEFAULT_SENSITIVE_KEYS
        self._sensitive = {k.lower() for k in keys}
        self._hashed = {k.lower() for k in (hash_keys or set())}

    def sanitize(self, metadata: Mapping[str, Any]) -> dict[str, Any]:
        """Return a sanitized copy; ``None`` values are dropped."""
        result: dict[str, Any] = {}
        for key, value in metadata.items():
            if value is None:
                continue
            result[str(key)] = self._clean(str(key).lower(), value)
        return result

    def _clean(self, key: str, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.sanitize(value)
        if key in self._hashed:
            return "sha256:" + hashlib.sha256(str(value).encode("utf-8")).hexdigest()
        if key in self._sensitive:
            return REDACTED
        return value


default_sanitizer = MetadataSanitizer()
