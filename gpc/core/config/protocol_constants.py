# gpc/core/config/protocol_constants.py

from typing import Final

class ProtocolConstants:
    """
    Vocabulario inmutable del protocolo.
    Centraliza las reglas fijas de la transacción de generación (Coinbase).
    """

    # ==========================================================================
    # 1. INPUT COINBASE
    # ==========================================================================

    # Una transacción Coinbase siempre apunta a este Hash ("0000...")
    COINBASE_PREV_HASH: Final[bytes] = b"\x00" * 32

    # El índice siempre es el máximo entero unsigned de 4 bytes
    COINBASE_INDEX: Final[int] = 0xFFFFFFFF

    COINBASE_SEQUENCE: Final[int] = 0x0

    # ==========================================================================
    # 2. ESTRUCTURA DE LA TRANSACCIÓN
    # ==========================================================================
    TX_VERSION: Final[int] = 1
    TX_VERSION_WITH_MESSAGE: Final[int] = 2
    LOCK_TIME: Final[int] = 0

    # Límites de consenso del scriptSig de una Coinbase (bytes)
    MIN_COINBASE_SCRIPT_SIZE: Final[int] = 2
    MAX_COINBASE_SCRIPT_SIZE: Final[int] = 100

    # ==========================================================================
    # 3. RANGOS DEL FORMATO BINARIO
    # ==========================================================================
    MAX_U32: Final[int] = 0xFFFFFFFF
    MAX_U64: Final[int] = 0xFFFFFFFFFFFFFFFF
