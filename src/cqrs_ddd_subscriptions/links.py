"""Signed unsubscribe links with HMAC-SHA256 verification."""

from __future__ import annotations

import hashlib
import hmac
import logging
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit

from .exceptions import InvalidUnsubscribeLinkError

logger = logging.getLogger(__name__)

_RECIPIENT_PARAM = "recipient"
_LIST_PARAM = "list"
_SIGNATURE_PARAM = "signature"


@dataclass(frozen=True)
class UnsubscribeRequest:
    """Verified contents of an unsubscribe link."""

    recipient_id: str
    mailing_list: str | None = None


class SignedUnsubscribeLinks:
    """
    Builds and verifies tamper-proof unsubscribe URLs.

    A notifiable can delegate its ``unsubscribe_link()`` to ``link()``;
    the endpoint handling the click calls ``verify()`` before touching any
    subscription state. The signature covers the URL path and the
    recipient/list parameters.
    """

    def __init__(self, base_url: str, secret: str):
        if not secret:
            raise ValueError("A signing secret is required for unsubscribe links.")
        self.base_url = base_url.rstrip("?")
        self.secret = secret
        self._path = urlsplit(self.base_url).path

    def link(self, recipient_id: object, mailing_list: str | None = None) -> str:
        params = {_RECIPIENT_PARAM: str(recipient_id)}
        if mailing_list is not None:
            params[_LIST_PARAM] = mailing_list
        query = urlencode(sorted(params.items()))
        signature = self._sign(self._path, query)
        separator = "&" if "?" in self.base_url else "?"
        return f"{self.base_url}{separator}{query}&{_SIGNATURE_PARAM}={signature}"

    def verify(self, url: str) -> UnsubscribeRequest:
        """Return the request encoded in ``url`` or raise InvalidUnsubscribeLinkError."""
        parts = urlsplit(url)
        params = dict(parse_qsl(parts.query, keep_blank_values=True))

        signature = params.get(_SIGNATURE_PARAM)
        if not signature:
            raise InvalidUnsubscribeLinkError(url, "missing signature")
        recipient_id = params.get(_RECIPIENT_PARAM)
        if not recipient_id:
            raise InvalidUnsubscribeLinkError(url, "missing recipient")

        signed = {_RECIPIENT_PARAM: recipient_id}
        if _LIST_PARAM in params:
            signed[_LIST_PARAM] = params[_LIST_PARAM]
        expected = self._sign(parts.path, urlencode(sorted(signed.items())))

        # Constant-time comparison to prevent timing attacks
        if not hmac.compare_digest(expected, signature):
            logger.warning(f"Rejected unsubscribe link for recipient {recipient_id}")
            raise InvalidUnsubscribeLinkError(url, "signature mismatch")

        return UnsubscribeRequest(recipient_id, signed.get(_LIST_PARAM))

    def _sign(self, path: str, query: str) -> str:
        return hmac.new(
            key=self.secret.encode("utf-8"),
            msg=f"{path}?{query}".encode("utf-8"),
            digestmod=hashlib.sha256,
        ).hexdigest()
