# gpc/core/models/outputs.py

import logging
from typing import List, Iterator

from gpc.core.models.tx_output import TxOutput
from gpc.core.scripting.script_builder import ScriptBuilder
from gpc.core.utils.binary_encoder import BinaryEncoder
from gpc.infra.identity.address_decoder import AddressDecoder

logger = logging.getLogger(__name__)

class OutputSet:
    """
    Colección ordenada de salidas de la transacción de generación.
    El orden de inserción forma parte de los bytes serializados (y por tanto del hash).
    """

    def __init__(self, decoder: AddressDecoder) -> None:
        self._decoder = decoder
        self._outputs: List[TxOutput] = []

    def add(self, address: str, amount: int) -> TxOutput:
        """Añade un pago a una dirección. Lanza InvalidAddress si no se reconoce."""
        script = ScriptBuilder.address_to_script(address, self._decoder)
        return self.add_script(script, amount)

    def add_script(self, script_pubkey: bytes, amount: int) -> TxOutput:
        output = TxOutput(amount=amount, script_pubkey=script_pubkey)
        self._outputs.append(output)
        logger.debug(f"Output #{len(self._outputs) - 1}: {amount} unidades -> {script_pubkey.hex()[:16]}...")
        return output

    @property
    def outputs(self) -> List[TxOutput]: return self._outputs[:]
    @property
    def count(self) -> int: return len(self._outputs)
    @property
    def total_amount(self) -> int: return sum(out.amount for out in self._outputs)

    def __len__(self) -> int:
        return len(self._outputs)

    def __iter__(self) -> Iterator[TxOutput]:
        return iter(self._outputs)

    def serialize(self) -> bytes:
        """
        Por cada salida: monto (8 bytes LE) + varint(len(script)) + script.
        El prefijo varint(count) lo escribe el llamador.
        """
        payload = bytearray()
        for out in self._outputs:
            payload.extend(BinaryEncoder.write_u64_le(out.amount))
            payload.extend(BinaryEncoder.varint(len(out.script_pubkey)))
            payload.extend(out.script_pubkey)
        return bytes(payload)
