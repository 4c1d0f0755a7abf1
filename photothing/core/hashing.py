"""Reversible short ids for public URLs."""
from typing import Optional
import logging

from hashids import Hashids

from photothing.models.base import valid_id

logger = logging.getLogger(__name__)


class PublicIdCodec:
    """
    Encode database ids as short URL-safe strings and back.

    Decoding never raises: anything that is not a hash of a single id
    produced with this salt decodes to None.
    """

    def __init__(self, salt: str, min_length: int = 4):
        self._hashids = Hashids(salt=salt, min_length=min_length)

    def encode(self, value: int) -> str:
        if value < 0:
            raise ValueError("only non-negative ids can be encoded")
        return self._hashids.encode(value)

    def decode(self, hashid: str) -> Optional[int]:
        if not hashid or not isinstance(hashid, str):
            return None
        try:
            values = self._hashids.decode(hashid)
        except Exception:
            logger.debug("undecodable public id %r", hashid, exc_info=True)
            return None
        if len(values) != 1 or not valid_id(values[0]):
            return None
        return values[0]
