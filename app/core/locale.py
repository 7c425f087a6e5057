"""
Locale-prefixed routing for the public site.

Every public path starts with a locale segment (/ko/..., /en/...). A request
without one is redirected to the same path under the negotiated locale:
locale cookie, then Accept-Language, then the default.
"""

import logging
from typing import Iterable, List, Optional, Tuple
from urllib.parse import quote

from starlette.requests import HTTPConnection
from starlette.responses import RedirectResponse

logger = logging.getLogger(__name__)

PASSTHROUGH_PREFIXES = ("/api", "/admin", "/health", "/ready", "/docs", "/redoc", "/openapi.json")


def parse_accept_language(header: Optional[str]) -> List[Tuple[str, float]]:
    """Language tags from an Accept-Language header, highest quality first."""
    if not header:
        return []
    languages = []
    for index, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality > 0:
            languages.append((tag, quality, index))
    languages.sort(key=lambda item: (-item[1], item[2]))
    return [(tag, quality) for tag, quality, _ in languages]


def negotiate_locale(header: Optional[str], locales: Iterable[str], default: str) -> str:
    supported = list(locales)
    for tag, _ in parse_accept_language(header):
        if tag in supported:
            return tag
        primary = tag.split("-")[0]
        if primary in supported:
            return primary
    return default


def split_locale(path: str, locales: Iterable[str]) -> Tuple[Optional[str], str]:
    """('en', '/notices') for '/en/notices'; (None, path) when the first segment is not a locale."""
    segment, _, rest = path.lstrip("/").partition("/")
    if segment in locales:
        return segment, "/" + rest if rest else "/"
    return None, path


class LocaleMiddleware:
    def __init__(
        self,
        app,
        locales: List[str],
        default_locale: str,
        cookie_name: str = "site_locale",
        detection: bool = True,
    ):
        if default_locale not in locales:
            raise ValueError(f"Default locale {default_locale!r} is not in {locales}")
        self.app = app
        self.locales = locales
        self.default_locale = default_locale
        self.cookie_name = cookie_name
        self.detection = detection

    def resolve_locale(self, conn: HTTPConnection) -> str:
        cookie_locale = conn.cookies.get(self.cookie_name)
        if cookie_locale in self.locales:
            return cookie_locale
        if self.detection:
            return negotiate_locale(conn.headers.get("accept-language"), self.locales, self.default_locale)
        return self.default_locale

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope["path"].startswith(PASSTHROUGH_PREFIXES):
            await self.app(scope, receive, send)
            return

        locale, _ = split_locale(scope["path"], self.locales)
        if locale is None:
            conn = HTTPConnection(scope)
            target_locale = self.resolve_locale(conn)
            path = scope["path"] if scope["path"] != "/" else ""
            url = f"/{target_locale}{quote(path)}"
            if scope.get("query_string"):
                url += "?" + scope["query_string"].decode("latin-1")
            logger.debug("Redirecting %s to %s", scope["path"], url)
            response = RedirectResponse(url, status_code=307)
            await response(scope, receive, send)
            return

        scope.setdefault("state", {})["locale"] = locale
        cookie = f"{self.cookie_name}={locale}; Path=/; SameSite=Lax".encode("latin-1")

        async def send_with_cookie(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"] = list(message["headers"]) + [(b"set-cookie", cookie)]
            await send(message)

        await self.app(scope, receive, send_with_cookie)
