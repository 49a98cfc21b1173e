# gpc/core/services/extra_nonce.py

import logging
import threading

from gpc.core.exceptions import EncodingOverflow
from gpc.core.interfaces.i_extra_nonce import IExtraNonce

logger = logging.getLogger(__name__)

class ExtraNonce(IExtraNonce):
    """
    Contador atómico de extranonce1.
    Los 5 bits altos llevan el id de instancia para que dos procesos del pool
    nunca repartan el mismo valor.
    """

    INSTANCE_SHIFT = 27
    MAX_INSTANCE_ID = 31

    def __init__(self, instance_id: int = 0, extranonce1_size: int = 4, extranonce2_size: int = 4) -> None:
        if not 0 <= instance_id <= self.MAX_INSTANCE_ID:
            raise ValueError(f"instance_id debe estar entre 0 y {self.MAX_INSTANCE_ID}.")
        if extranonce1_size < 4 or extranonce2_size < 0:
            raise ValueError("extranonce1 requiere al menos 4 bytes y extranonce2 no puede ser negativo.")

        self._extranonce1_size = extranonce1_size
        self._extranonce2_size = extranonce2_size
        self._lock = threading.Lock()
        self._current: int = instance_id << self.INSTANCE_SHIFT
        self._limit: int = (instance_id + 1) << self.INSTANCE_SHIFT

        self._placeholder = b"\xf0" * extranonce1_size + b"\x0f" * extranonce2_size

        logger.info(
            f"ExtraNonce listo: instancia {instance_id} | "
            f"{extranonce1_size}+{extranonce2_size} bytes"
        )

    @property
    def extra_nonce_placeholder(self) -> bytes: return self._placeholder
    @property
    def extranonce1_size(self) -> int: return self._extranonce1_size
    @property
    def extranonce2_size(self) -> int: return self._extranonce2_size

    def next_extranonce1(self) -> bytes:
        with self._lock:
            self._current += 1
            if self._current >= self._limit:
                raise EncodingOverflow("Rango de extranonce1 agotado para esta instancia.")
            value = self._current

        return value.to_bytes(self._extranonce1_size, "big")
