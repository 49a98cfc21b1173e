# gpc/core/interfaces/i_extra_nonce.py

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

class IExtraNonce(ABC):
    """
    [Colaborador Externo]
    Fuente de extra-nonces únicos por sesión de minero.

    El constructor de la transacción de generación solo consume la longitud
    del placeholder; su contenido nunca se serializa.
    """

    @property
    @abstractmethod
    def extra_nonce_placeholder(self) -> bytes:
        """
        Returns:
            bytes: Placeholder de longitud extranonce1 + extranonce2.
        """
        pass

    @property
    @abstractmethod
    def extranonce2_size(self) -> int:
        pass

    @abstractmethod
    def next_extranonce1(self) -> bytes:
        """
        Entrega un extranonce1 que ningún otro minero recibe para el mismo trabajo.
        La implementación debe ser segura entre hilos.
        """
        pass
