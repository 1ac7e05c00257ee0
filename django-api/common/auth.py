"""Identity as seen by the rest of the site.

The authentication provider (django.contrib.auth) owns users. Services only
read an AuthContext built once per request at the handler boundary.
"""

from dataclasses import dataclass
from typing import Self

from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import AnonymousUser
from rest_framework.request import Request


@dataclass(frozen=True)
class Identity:
    """Opaque, read-only view of a signed-in user."""

    id: str
    display_name: str | None = None
    email: str | None = None
    email_verified: bool = False
    photo_url: str | None = None
    providers: tuple[str, ...] = ()

    @classmethod
    def from_user(cls, user: AbstractBaseUser) -> Self:
        full_name = user.get_full_name().strip() if hasattr(user, "get_full_name") else ""
        return cls(
            id=str(user.pk),
            display_name=full_name or user.get_username() or None,
            email=getattr(user, "email", "") or None,
            providers=("django",),
        )


@dataclass(frozen=True)
class AuthContext:
    """Who is making the current request.

    session_key identifies the browsing context for anonymous visitors.
    """

    identity: Identity | None
    session_key: str = ""

    @property
    def actor(self) -> str:
        """Stable key for per-visitor locks."""
        if self.identity is not None:
            return f"user:{self.identity.id}"
        return f"session:{self.session_key}"

    @classmethod
    def anonymous(cls, session_key: str = "") -> Self:
        return cls(identity=None, session_key=session_key)

    @classmethod
    def from_request(cls, request: Request, create_session: bool = False) -> Self:
        """Build the context for request.

        Read-only paths leave cookieless visitors without a session. Writers
        that lock on the anonymous actor pass create_session=True.
        """
        session = request.session
        if create_session and not session.session_key:
            session.save()
        user = request.user
        if user is None or isinstance(user, AnonymousUser) or not user.is_authenticated:
            return cls.anonymous(session.session_key or "")
        return cls(identity=Identity.from_user(user), session_key=session.session_key or "")
