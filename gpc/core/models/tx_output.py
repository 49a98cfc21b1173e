# gpc/core/models/tx_output.py

import logging
from typing import Dict, Any, Union

from gpc.core.config.protocol_constants import ProtocolConstants
from gpc.core.exceptions import EncodingOverflow

logger = logging.getLogger(__name__)

class TxOutput:
    """
    Representa una salida de transacción (monto en unidades enteras + scriptPubKey).
    """

    def __init__(self, amount: int, script_pubkey: Union[str, bytes]):
        if not isinstance(amount, int):
            raise TypeError(f"El monto debe ser entero (unidades mínimas). Recibido: {type(amount)}")
        if amount < 0 or amount > ProtocolConstants.MAX_U64:
            raise EncodingOverflow(f"Monto de output fuera de rango u64: {amount}")

        self._amount: int = amount

        if isinstance(script_pubkey, bytes):
            self._script_pubkey: bytes = script_pubkey
        elif isinstance(script_pubkey, str):
            self._script_pubkey = bytes.fromhex(script_pubkey)
        else:
            raise TypeError(f"script_pubkey debe ser str (hex) o bytes. Recibido: {type(script_pubkey)}")

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def script_pubkey(self) -> bytes:
        return self._script_pubkey

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": self._amount,
            "script_pubkey": self._script_pubkey.hex()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TxOutput):
            return NotImplemented
        return self._amount == other._amount and self._script_pubkey == other._script_pubkey

    def __repr__(self) -> str:
        return f"<TxOutput amount={self._amount} script={self._script_pubkey.hex()[:8]}...>"
