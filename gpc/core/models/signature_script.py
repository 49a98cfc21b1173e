# gpc/core/models/signature_script.py

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class SignatureScript:
    """
    scriptSig de la Coinbase partido en el punto de inyección del extra-nonce.

    initial: altura (BIP34) + flags auxiliares + timestamp + opcode de push del extra-nonce.
    final:   etiqueta del pool.
    extra_nonce_length: bytes que el minero insertará entre ambas partes.
    """
    initial: bytes
    final: bytes
    extra_nonce_length: int

    @property
    def declared_length(self) -> int:
        """Longitud total del script una vez insertado el extra-nonce."""
        return len(self.initial) + self.extra_nonce_length + len(self.final)
