# gpc/core/utils/binary_encoder.py

import struct
import logging
from typing import Tuple

from gpc.core.config.protocol_constants import ProtocolConstants
from gpc.core.exceptions import EncodingOverflow

logger = logging.getLogger(__name__)

class BinaryEncoder:
    """
    Primitivas de serialización del formato de red (Little Endian + VarInt).
    Funciones puras: misma entrada, mismos bytes.
    """

    @staticmethod
    def _check_range(value: int, maximum: int, field: str) -> None:
        if value < 0 or value > maximum:
            raise EncodingOverflow(f"{field} fuera de rango: {value} (máx {maximum})")

    @staticmethod
    def write_u32_le(value: int) -> bytes:
        BinaryEncoder._check_range(value, ProtocolConstants.MAX_U32, "u32")
        return struct.pack("<I", value)

    @staticmethod
    def write_u64_le(value: int) -> bytes:
        BinaryEncoder._check_range(value, ProtocolConstants.MAX_U64, "u64")
        return struct.pack("<Q", value)

    @staticmethod
    def write_bytes(data: bytes) -> bytes:
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Se esperaban bytes. Recibido: {type(data)}")
        return bytes(data)

    @staticmethod
    def varint(value: int) -> bytes:
        """
        Codifica un entero como CompactSize (VarInt):
            < 0xFD        -> 1 byte
            <= 0xFFFF     -> 0xFD + 2 bytes LE
            <= 0xFFFFFFFF -> 0xFE + 4 bytes LE
            resto         -> 0xFF + 8 bytes LE
        """
        BinaryEncoder._check_range(value, ProtocolConstants.MAX_U64, "varint")

        if value < 0xFD:
            return struct.pack("<B", value)
        if value <= 0xFFFF:
            return b"\xfd" + struct.pack("<H", value)
        if value <= 0xFFFFFFFF:
            return b"\xfe" + struct.pack("<I", value)
        return b"\xff" + struct.pack("<Q", value)

    @staticmethod
    def read_varint(buffer: bytes, offset: int = 0) -> Tuple[int, int]:
        """Decodifica un VarInt. Retorna (valor, nuevo_offset)."""
        if offset >= len(buffer):
            raise EncodingOverflow("VarInt truncado: buffer agotado.")

        prefix = buffer[offset]
        if prefix < 0xFD:
            return prefix, offset + 1

        size = {0xFD: 2, 0xFE: 4, 0xFF: 8}[prefix]
        end = offset + 1 + size
        if end > len(buffer):
            raise EncodingOverflow(f"VarInt truncado: se esperaban {size} bytes.")

        value = int.from_bytes(buffer[offset + 1:end], "little")
        return value, end
