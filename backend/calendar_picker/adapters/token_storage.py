"""Security token storage backed by bearer JWTs.

Claims understood on the token:
  sub       user id (required for a back end user)
  username  display name
  admin     bool, grants access to every module
  modules   list of module keys the user may access
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from jose import jwt, JWTError

from .. import config
from ..ports.picker import Token, TokenStorage

logger = logging.getLogger(__name__)


@dataclass
class BackendUser:
    id: str
    username: str = ""
    admin: bool = False
    modules: List[str] = field(default_factory=list)

    def has_access(self, module_key: str, field: str = "modules") -> bool:
        if self.admin:
            return True
        allowed = getattr(self, field, None)
        if not isinstance(allowed, list):
            return False
        return module_key in allowed


class ClaimsToken(Token):
    def __init__(self, claims: Dict[str, Any]):
        self.claims = claims

    def get_user(self) -> Optional[BackendUser]:
        sub = self.claims.get("sub")
        if not sub:
            return None
        return BackendUser(
            id=str(sub),
            username=self.claims.get("username") or "",
            admin=bool(self.claims.get("admin", False)),
            modules=list(self.claims.get("modules") or []),
        )


class StaticTokenStorage(TokenStorage):
    def __init__(self, token: Optional[Token] = None):
        self._token = token

    def get_token(self) -> Optional[Token]:
        return self._token

    def set_token(self, token: Optional[Token]) -> None:
        self._token = token


class BearerTokenStorage(TokenStorage):
    """Reads the token from an ``Authorization: Bearer ...`` header value."""

    def __init__(self, authorization: Optional[str]):
        self.authorization = authorization

    def get_token(self) -> Optional[ClaimsToken]:
        if not self.authorization or not self.authorization.lower().startswith("bearer "):
            return None
        raw = self.authorization.split(None, 1)[1]
        try:
            claims = jwt.decode(raw, config.SECRET_KEY, algorithms=[config.ALGORITHM])
        except JWTError:
            logger.debug("rejected invalid bearer token")
            return None
        return ClaimsToken(claims)


def create_access_token(
    sub: str,
    modules: Optional[List[str]] = None,
    admin: bool = False,
    username: str = "",
    expires_delta: Optional[timedelta] = None,
) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {
        "sub": sub,
        "username": username,
        "admin": admin,
        "modules": list(modules or []),
        "exp": expire,
    }
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)
