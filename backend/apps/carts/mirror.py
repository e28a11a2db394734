from __future__ import annotations

from typing import Dict, Mapping, Optional
from urllib.parse import quote, unquote

from django.conf import settings

from apps.common import get_logger

logger = get_logger(__name__).bind(component="carts", layer="mirror")

CART_KEY = "cart"


class CookieMirror:
    """Key-value view over the shopper's cookies.

    Reads come from the incoming request cookies, writes are kept as pending
    and turned into ``Set-Cookie`` headers by :meth:`apply`. A value written
    during the request is visible to later reads. Values are percent-encoded
    the same way browser cookie libraries do, so client-side code can read
    and write the same keys.
    """

    def __init__(
        self,
        cookies: Optional[Mapping[str, str]] = None,
        *,
        max_age: Optional[int] = None,
    ):
        self._cookies = dict(cookies or {})
        self._pending: Dict[str, str] = {}
        self.max_age = settings.CART_COOKIE_MAX_AGE if max_age is None else max_age

    @classmethod
    def from_request(cls, request) -> "CookieMirror":
        return cls(getattr(request, "COOKIES", None))

    def get(self, key: str) -> Optional[str]:
        if key in self._pending:
            return self._pending[key]
        raw = self._cookies.get(key)
        return unquote(raw) if raw is not None else None

    def set(self, key: str, value: str) -> None:
        self._pending[key] = value

    @property
    def pending(self) -> Dict[str, str]:
        return dict(self._pending)

    def snapshot(self) -> Dict[str, str]:
        """Cookie jar as the browser will hold it after :meth:`apply` (encoded values)."""
        jar = dict(self._cookies)
        jar.update({key: quote(value, safe="") for key, value in self._pending.items()})
        return jar

    def apply(self, response) -> None:
        for key, value in self._pending.items():
            response.set_cookie(
                key,
                quote(value, safe=""),
                max_age=self.max_age,
                path="/",
                samesite="Lax",
                httponly=False,
            )
        if self._pending:
            logger.debug("Mirror writes applied", keys=sorted(self._pending))
        self._cookies = self.snapshot()
        self._pending.clear()
