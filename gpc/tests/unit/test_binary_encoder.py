# gpc/tests/unit/test_binary_encoder.py
'''
Test Suite para BinaryEncoder:
    Verifica las primitivas Little Endian y la codificación VarInt (CompactSize)
    en todos los límites de cambio de prefijo.
'''

import sys
import os
import pytest

# --- AJUSTE DE RUTA PARA EJECUCIÓN DIRECTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from gpc.core.utils.binary_encoder import BinaryEncoder
from gpc.core.exceptions import EncodingOverflow

VARINT_BOUNDARIES = {
    0: "00",
    0xFC: "fc",
    0xFD: "fdfd00",
    0xFFFF: "fdffff",
    0x10000: "fe00000100",
    0xFFFFFFFF: "feffffffff",
    0x100000000: "ff0000000001000000",
}

def test_varint_boundaries_encode_and_decode():
    print(">> Ejecutando: test_varint_boundaries_encode_and_decode...")

    for value, expected_hex in VARINT_BOUNDARIES.items():
        encoded = BinaryEncoder.varint(value)
        assert encoded.hex() == expected_hex

        decoded, offset = BinaryEncoder.read_varint(encoded)
        assert decoded == value
        assert offset == len(encoded)

    print("[SUCCESS] VarInt consistente en todos los límites.\n")

def test_read_varint_at_offset():
    buffer = b"\x99" + BinaryEncoder.varint(0x1234) + b"\x01"
    value, offset = BinaryEncoder.read_varint(buffer, 1)

    assert value == 0x1234
    assert buffer[offset:] == b"\x01"

def test_read_varint_truncated():
    with pytest.raises(EncodingOverflow):
        BinaryEncoder.read_varint(b"\xfe\x01\x02")
    with pytest.raises(EncodingOverflow):
        BinaryEncoder.read_varint(b"")

def test_little_endian_writers():
    assert BinaryEncoder.write_u32_le(1).hex() == "01000000"
    assert BinaryEncoder.write_u32_le(0xFFFFFFFF).hex() == "ffffffff"
    assert BinaryEncoder.write_u64_le(5_000_000_000).hex() == "00f2052a01000000"
    assert BinaryEncoder.write_bytes(b"\x01\x02") == b"\x01\x02"

def test_writers_reject_out_of_range_values():
    print(">> Ejecutando: test_writers_reject_out_of_range_values...")

    with pytest.raises(EncodingOverflow):
        BinaryEncoder.write_u32_le(0x100000000)
    with pytest.raises(EncodingOverflow):
        BinaryEncoder.write_u32_le(-1)
    with pytest.raises(EncodingOverflow):
        BinaryEncoder.write_u64_le(2 ** 64)
    with pytest.raises(EncodingOverflow):
        BinaryEncoder.varint(2 ** 64)

    print("[SUCCESS] Desbordamientos detectados.\n")

if __name__ == "__main__":
    test_varint_boundaries_encode_and_decode()
    test_writers_reject_out_of_range_values()
