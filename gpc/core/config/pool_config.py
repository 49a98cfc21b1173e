# gpc/core/config/pool_config.py

import os
from typing import Dict, Any

from gpc.core.exceptions import EncodingOverflow

class PoolConfig:
    """
    Configuración del pool: etiqueta de la Coinbase, mensajes de transacción
    y tamaños del extra-nonce.
    """
    def __init__(self):
        self._pool_tag = self._ascii(os.getenv("GPC_POOL_TAG", "/gpc/"), "GPC_POOL_TAG")
        self._support_tx_messages = os.getenv("GPC_SUPPORT_TX_MESSAGES", "False").lower() == "true"
        self._tx_message = self._ascii(os.getenv("GPC_TX_MESSAGE", "Mined by GPC"), "GPC_TX_MESSAGE")
        self._extranonce1_size = int(os.getenv("GPC_EXTRANONCE1_SIZE", 4))
        self._extranonce2_size = int(os.getenv("GPC_EXTRANONCE2_SIZE", 4))
        self._instance_id = int(os.getenv("GPC_INSTANCE_ID", 0))

    @staticmethod
    def _ascii(value: Any, key: str) -> str:
        # Etiqueta y mensaje viajan como ASCII dentro de la transacción
        text = str(value)
        if not text.isascii():
            raise EncodingOverflow(f"'{key}' debe ser ASCII: {text!r}")
        return text

    @property
    def pool_tag(self) -> str: return self._pool_tag
    @property
    def support_tx_messages(self) -> bool: return self._support_tx_messages
    @property
    def tx_message(self) -> str: return self._tx_message
    @property
    def extranonce1_size(self) -> int: return self._extranonce1_size
    @property
    def extranonce2_size(self) -> int: return self._extranonce2_size
    @property
    def instance_id(self) -> int: return self._instance_id

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Recibe un diccionario plano con claves de 'pool' y 'extraNonce'.
        """
        if not data: return

        if "poolTag" in data:
            self._pool_tag = self._ascii(data["poolTag"], "poolTag")

        if "supportTransactionMessages" in data:
            self._support_tx_messages = bool(data["supportTransactionMessages"])

        if "transactionMessage" in data:
            self._tx_message = self._ascii(data["transactionMessage"], "transactionMessage")

        if "extranonce1Size" in data:
            self._extranonce1_size = int(data["extranonce1Size"])

        if "extranonce2Size" in data:
            self._extranonce2_size = int(data["extranonce2Size"])

        if "instanceId" in data:
            self._instance_id = int(data["instanceId"])
