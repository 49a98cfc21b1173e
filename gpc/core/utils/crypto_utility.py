# gpc/core/utils/crypto_utility.py

import hashlib
import logging
from typing import Union

logger = logging.getLogger(__name__)

class CryptoUtility:

    @staticmethod
    def double_sha256(data: Union[str, bytes]) -> bytes:
        """Aplica Doble SHA-256 (estándar PoW). Retorna el digest crudo."""
        data_bytes = CryptoUtility._to_bytes(data)
        first_hash = hashlib.sha256(data_bytes).digest()
        return hashlib.sha256(first_hash).digest()

    @staticmethod
    def _to_bytes(data: Union[str, bytes]) -> bytes:
        """Normaliza entrada a bytes de forma segura."""
        if isinstance(data, str):
            return bytes.fromhex(data)
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)
        raise TypeError(f"Tipo no soportado para hashing: {type(data)}")
