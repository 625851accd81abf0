"""
Génération de l'URL d'avatar Gravatar à partir d'une adresse e-mail.

L'avatar ne doit jamais bloquer la création d'un utilisateur : si MD5 n'est
pas disponible dans l'environnement (OpenSSL en mode FIPS, par exemple),
on renvoie l'avatar générique "mystery person".
"""

import hashlib
import logging
from typing import Callable, NamedTuple, Optional

logger = logging.getLogger(__name__)

AVATAR_URL_TEMPLATE = "https://gravatar.com/avatar/{digest}?d=identicon"
FALLBACK_AVATAR_URL = "https://gravatar.com/avatar/?d=mp"


class DigestResult(NamedTuple):
    """Résultat à deux branches : un condensé hexadécimal, ou rien si MD5 est indisponible."""
    hexdigest: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.hexdigest is not None


UNAVAILABLE = DigestResult()


def md5_digest(text: str) -> DigestResult:
    if "md5" not in hashlib.algorithms_available:
        return UNAVAILABLE
    try:
        digest = hashlib.new("md5", text.encode("utf-8"))
    except ValueError:
        # hashlib refuse l'algorithme (politique FIPS)
        return UNAVAILABLE
    return DigestResult(digest.hexdigest())


def generate(email: str, digest: Callable[[str], DigestResult] = md5_digest) -> str:
    """Retourne l'URL Gravatar (identicon) correspondant à l'e-mail."""
    result = digest(email)
    if not result.available:
        logger.warning("MD5 indisponible, avatar générique utilisé")
        return FALLBACK_AVATAR_URL
    return AVATAR_URL_TEMPLATE.format(digest=result.hexdigest.lower())
