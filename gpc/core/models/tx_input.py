# gpc/core/models/tx_input.py

from dataclasses import dataclass, field

from gpc.core.config.protocol_constants import ProtocolConstants
from gpc.core.models.signature_script import SignatureScript

@dataclass(frozen=True)
class OutPoint:
    """Referencia a una salida previa (hash de 32 bytes + índice u32)."""
    hash: bytes
    index: int

    def __post_init__(self) -> None:
        if len(self.hash) != 32:
            raise ValueError(f"El hash de un OutPoint debe tener 32 bytes (recibido {len(self.hash)}).")
        if not 0 <= self.index <= ProtocolConstants.MAX_U32:
            raise ValueError(f"Índice de OutPoint fuera de rango u32: {self.index}")

    @staticmethod
    def coinbase() -> 'OutPoint':
        # Input nulo estándar: hash ceros y índice máximo
        return OutPoint(ProtocolConstants.COINBASE_PREV_HASH, ProtocolConstants.COINBASE_INDEX)

    @property
    def is_null(self) -> bool:
        return self.hash == ProtocolConstants.COINBASE_PREV_HASH and self.index == ProtocolConstants.COINBASE_INDEX


@dataclass(frozen=True)
class TxInput:
    signature_script: SignatureScript
    previous_output: OutPoint = field(default_factory=OutPoint.coinbase)
    sequence: int = ProtocolConstants.COINBASE_SEQUENCE
