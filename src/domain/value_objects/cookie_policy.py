"""Cookie Policy value objects.

Session credentials travel in two cookies:

* ``access_token``: short-lived, sent on every request (path ``/``).
* ``refresh_token``: long-lived, scoped by ``path`` to the refresh route only,
  so browsers attach it nowhere else.

Each cookie is governed by an immutable `CookieDescriptor`. Browsers match a
cookie for removal on name, path, domain and security attributes, therefore
the descriptor used to clear a cookie is the setting descriptor minus
``max_age``. A clear issued with different attributes is a silent no-op on the
client.
"""

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Literal, Optional

ACCESS_TOKEN_COOKIE = "access_token"
REFRESH_TOKEN_COOKIE = "refresh_token"


@dataclass(frozen=True)
class CookieDescriptor:
    """Transport attributes for one credential cookie.

    Attribute names follow Starlette's ``Response.set_cookie`` keywords so a
    descriptor can be splatted straight into it.
    """

    max_age: int
    secure: bool
    path: str = "/"
    domain: Optional[str] = None
    httponly: bool = True
    samesite: Literal["lax", "strict", "none"] = "strict"

    def __post_init__(self):
        if self.max_age <= 0:
            raise ValueError("Cookie max_age must be a positive number of seconds")
        if not self.path.startswith("/"):
            raise ValueError("Cookie path must be absolute")

    def set_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for setting the cookie."""
        return asdict(self)

    def clear_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for clearing the cookie: every attribute but ``max_age``."""
        kwargs = asdict(self)
        kwargs.pop("max_age")
        return kwargs


@dataclass(frozen=True)
class CookiePolicy:
    """The pair of descriptors for the access and refresh cookies.

    Built once per process from settings and shared read-only by all requests.
    """

    access: CookieDescriptor
    refresh: CookieDescriptor

    PRODUCTION_ENV: ClassVar[str] = "production"
    REFRESH_ROUTE: ClassVar[str] = "/auth/refresh"

    @classmethod
    def from_settings(cls, settings) -> "CookiePolicy":
        """Derive both descriptors from application settings.

        ``secure`` is true only when ``NODE_ENV`` is exactly ``production``.
        The refresh cookie is path-scoped to ``{API_URL}/auth/refresh``.

        Args:
            settings: Object exposing ``ACCESS_TOKEN_EXPIRES_IN``,
                ``REFRESH_TOKEN_EXPIRES_IN``, ``NODE_ENV`` and ``API_URL``.

        Raises:
            ValueError: If a required setting is missing or invalid.
        """
        for key in ("ACCESS_TOKEN_EXPIRES_IN", "REFRESH_TOKEN_EXPIRES_IN", "NODE_ENV", "API_URL"):
            if getattr(settings, key, None) is None:
                raise ValueError(f"Missing required setting: {key}")

        secure = settings.NODE_ENV == cls.PRODUCTION_ENV
        return cls(
            access=CookieDescriptor(
                max_age=settings.ACCESS_TOKEN_EXPIRES_IN,
                secure=secure,
            ),
            refresh=CookieDescriptor(
                max_age=settings.REFRESH_TOKEN_EXPIRES_IN,
                secure=secure,
                path=f"{settings.API_URL}{cls.REFRESH_ROUTE}",
            ),
        )
