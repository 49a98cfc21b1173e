# gpc/core/services/transaction_decoder.py

import struct
from dataclasses import dataclass, field
from typing import List

from gpc.core.exceptions import EncodingOverflow
from gpc.core.models.tx_output import TxOutput
from gpc.core.utils.binary_encoder import BinaryEncoder


@dataclass(frozen=True)
class DecodedInput:
    previous_hash: bytes
    previous_index: int
    script_length: int
    script_sig: bytes
    sequence: int

@dataclass(frozen=True)
class DecodedTransaction:
    version: int
    inputs: List[DecodedInput]
    outputs: List[TxOutput]
    lock_time: int
    trailing: bytes = field(default=b"")

    @property
    def total_output(self) -> int:
        return sum(out.amount for out in self.outputs)


class TransactionDecoder:
    """
    Lector de transacciones serializadas (formato sin witness).
    Los bytes que quedan tras el locktime (p.ej. el mensaje de la tx) se devuelven en 'trailing'.
    """

    @staticmethod
    def _take(buffer: bytes, offset: int, size: int) -> bytes:
        end = offset + size
        if end > len(buffer):
            raise EncodingOverflow(f"Transacción truncada: se pedían {size} bytes en offset {offset}.")
        return buffer[offset:end]

    @staticmethod
    def decode(raw: bytes) -> DecodedTransaction:
        take = TransactionDecoder._take
        i = 0

        version = struct.unpack("<I", take(raw, i, 4))[0]; i += 4

        inputs: List[DecodedInput] = []
        input_count, i = BinaryEncoder.read_varint(raw, i)
        for _ in range(input_count):
            prev_hash = take(raw, i, 32); i += 32
            prev_index = struct.unpack("<I", take(raw, i, 4))[0]; i += 4
            script_length, i = BinaryEncoder.read_varint(raw, i)
            script_sig = take(raw, i, script_length); i += script_length
            sequence = struct.unpack("<I", take(raw, i, 4))[0]; i += 4
            inputs.append(DecodedInput(prev_hash, prev_index, script_length, script_sig, sequence))

        outputs: List[TxOutput] = []
        output_count, i = BinaryEncoder.read_varint(raw, i)
        for _ in range(output_count):
            amount = struct.unpack("<Q", take(raw, i, 8))[0]; i += 8
            script_length, i = BinaryEncoder.read_varint(raw, i)
            script = take(raw, i, script_length); i += script_length
            outputs.append(TxOutput(amount=amount, script_pubkey=script))

        lock_time = struct.unpack("<I", take(raw, i, 4))[0]; i += 4

        return DecodedTransaction(version, inputs, outputs, lock_time, raw[i:])
