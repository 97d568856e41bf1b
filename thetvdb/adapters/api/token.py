"""
Gestion du jeton d'authentification JWT de l'API TheTVDB.

Le jeton est obtenu par POST /login et expire apres 24 heures. Il est
renouvele des qu'il entre dans la marge d'expiration (60 s par defaut).

get_token() est une operation atomique "lire ou renouveler" protegee par
un asyncio.Lock : si plusieurs requetes constatent en meme temps que le
jeton est perime, un seul login est effectue et toutes recoivent le
nouveau jeton.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

import jwt
from loguru import logger

from thetvdb.core.errors import InvalidTokenError

DEFAULT_REFRESH_MARGIN = timedelta(seconds=60)

Clock = Callable[[], datetime]
TokenFetcher = Callable[[], Awaitable[str]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _claim_time(claims: dict, *names: str) -> datetime:
    for name in names:
        value = claims.get(name)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidTokenError(f"claim {name!r} is not a timestamp")
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    raise InvalidTokenError(f"missing claim {names[0]!r}")


@dataclass(frozen=True)
class Credential:
    """
    Jeton d'authentification et ses dates d'emission et d'expiration.

    Remplace d'un bloc a chaque login, jamais modifie.
    """

    token: str
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def from_jwt(cls, token: str) -> "Credential":
        """
        Decode la charge utile du JWT sans verifier la signature.

        Args:
            token: JWT renvoye par /login

        Returns:
            Credential avec les dates issues des claims orig_iat et exp

        Raises:
            InvalidTokenError: Si le jeton n'est pas un JWT decodable
        """
        try:
            claims = jwt.decode(token, options={"verify_signature": False})
        except jwt.PyJWTError as e:
            raise InvalidTokenError(str(e)) from e

        return cls(
            token=token,
            issued_at=_claim_time(claims, "orig_iat", "iat"),
            expires_at=_claim_time(claims, "exp"),
        )

    def is_fresh(self, now: datetime, margin: timedelta = DEFAULT_REFRESH_MARGIN) -> bool:
        """Vrai si le jeton reste valide au-dela de la marge."""
        return self.expires_at - margin >= now


class TokenManager:
    """
    Garde du jeton : fournit un jeton valide, en se reconnectant si besoin.

    Args:
        fetch: Coroutine effectuant le login et renvoyant le JWT brut
        margin: Marge avant expiration a partir de laquelle on renouvelle
        clock: Horloge injectable (UTC)
    """

    def __init__(
        self,
        fetch: TokenFetcher,
        margin: timedelta = DEFAULT_REFRESH_MARGIN,
        clock: Clock = utc_now,
    ) -> None:
        self._fetch = fetch
        self._margin = margin
        self._clock = clock
        self._credential: Optional[Credential] = None
        self._lock = asyncio.Lock()

    @property
    def credential(self) -> Optional[Credential]:
        return self._credential

    @property
    def margin(self) -> timedelta:
        return self._margin

    async def get_token(self) -> str:
        """
        Retourne un jeton valide, en se reconnectant s'il est absent ou perime.

        Le verrou est conserve pendant le login : les appelants concurrents
        attendent puis trouvent le jeton renouvele.

        Raises:
            TVDBError: Si le login echoue
        """
        async with self._lock:
            credential = self._credential
            if credential is not None and credential.is_fresh(self._clock(), self._margin):
                return credential.token
            if credential is None:
                logger.debug("Aucun jeton TheTVDB, connexion")
            else:
                logger.debug(f"Jeton TheTVDB expirant le {credential.expires_at}, renouvellement")
            return await self._login()

    async def refresh(self) -> str:
        """Force un nouveau login, meme si le jeton courant est valide."""
        async with self._lock:
            return await self._login()

    def invalidate(self) -> None:
        self._credential = None

    async def _login(self) -> str:
        token = await self._fetch()
        self._credential = Credential.from_jwt(token)
        logger.debug(f"Jeton TheTVDB obtenu, expire le {self._credential.expires_at}")
        return self._credential.token
