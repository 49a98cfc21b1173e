# gpc/core/scripting/script_builder.py

import logging
from typing import Optional

from gpc.core.config.protocol_constants import ProtocolConstants
from gpc.core.exceptions import EncodingOverflow, GenerationError
from gpc.core.models.destination import Destination, PubKeyHash, ScriptHash, WitnessProgram
from gpc.core.models.signature_script import SignatureScript
from gpc.core.scripting.opcodes import Opcodes, MAX_DIRECT_PUSH
from gpc.core.utils.binary_encoder import BinaryEncoder
from gpc.infra.identity.address_decoder import AddressDecoder

logger = logging.getLogger(__name__)

class ScriptBuilder:

    @staticmethod
    def serialize_number(value: int) -> bytes:
        """
        Push mínimo de un entero (CScriptNum positivo), exigido por BIP34:
        0 -> OP_0, 1..16 -> OP_1..OP_16, resto -> <len> <bytes LE>.
        """
        if value < 0 or value > ProtocolConstants.MAX_U64:
            raise EncodingOverflow(f"Número de script fuera de rango: {value}")

        if value <= 16:
            return bytes([Opcodes.small_int(value)])

        data = bytearray()
        while value:
            data.append(value & 0xff)
            value >>= 8

        # El bit alto del último byte es el signo: se añade 0x00 para mantenerlo positivo
        if data[-1] & 0x80:
            data.append(0x00)

        return bytes([len(data)]) + bytes(data)

    @staticmethod
    def serialize_string(text: str) -> bytes:
        """<varint(len)> <ascii>. Se usa para la etiqueta del pool y el mensaje de la tx."""
        try:
            data = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise EncodingOverflow(f"Texto no ASCII en el script: {text!r}") from e
        return BinaryEncoder.varint(len(data)) + data

    @staticmethod
    def push_data(data: bytes) -> bytes:
        if len(data) <= MAX_DIRECT_PUSH:
            return bytes([len(data)]) + data
        if len(data) <= 0xff:
            return bytes([Opcodes.OP_PUSHDATA1, len(data)]) + data
        raise EncodingOverflow(f"Push de {len(data)} bytes no soportado en scripts de salida.")

    @staticmethod
    def build_signature_script(
        height: int,
        aux_flags: bytes,
        timestamp: int,
        extra_nonce_length: int,
        pool_tag: str
    ) -> SignatureScript:
        """
        Construye el scriptSig de la Coinbase partido en el punto de inyección:

            initial = push(altura) + flags + push(timestamp) + <opcode push(extra_nonce_length)>
            final   = serialize_string(pool_tag)

        Ninguna de las dos partes depende del valor del extra-nonce, solo de su longitud.
        """
        if height < 0 or height > ProtocolConstants.MAX_U32:
            raise EncodingOverflow(f"Altura de bloque fuera de rango u32: {height}")

        # El opcode de push directo solo cubre 0..75 bytes
        if extra_nonce_length < 0 or extra_nonce_length > MAX_DIRECT_PUSH:
            raise EncodingOverflow(f"Longitud de extra-nonce no representable: {extra_nonce_length}")

        initial = (
            ScriptBuilder.serialize_number(height) +
            BinaryEncoder.write_bytes(aux_flags) +
            ScriptBuilder.serialize_number(timestamp) +
            bytes([extra_nonce_length])
        )
        final = ScriptBuilder.serialize_string(pool_tag)

        script = SignatureScript(initial=initial, final=final, extra_nonce_length=extra_nonce_length)

        size = script.declared_length
        if not ProtocolConstants.MIN_COINBASE_SCRIPT_SIZE <= size <= ProtocolConstants.MAX_COINBASE_SCRIPT_SIZE:
            raise EncodingOverflow(
                f"scriptSig de {size} bytes fuera del rango de consenso "
                f"({ProtocolConstants.MIN_COINBASE_SCRIPT_SIZE}-{ProtocolConstants.MAX_COINBASE_SCRIPT_SIZE})"
            )

        logger.debug(f"scriptSig Coinbase: altura {height} | {size} bytes (extra-nonce: {extra_nonce_length})")
        return script

    @staticmethod
    def build_output_script(destination: Destination) -> bytes:
        if isinstance(destination, PubKeyHash):
            # OP_DUP OP_HASH160 <20> OP_EQUALVERIFY OP_CHECKSIG
            return (
                bytes([Opcodes.OP_DUP, Opcodes.OP_HASH160]) +
                ScriptBuilder.push_data(destination.hash160) +
                bytes([Opcodes.OP_EQUALVERIFY, Opcodes.OP_CHECKSIG])
            )

        if isinstance(destination, ScriptHash):
            # OP_HASH160 <20> OP_EQUAL
            return (
                bytes([Opcodes.OP_HASH160]) +
                ScriptBuilder.push_data(destination.hash160) +
                bytes([Opcodes.OP_EQUAL])
            )

        if isinstance(destination, WitnessProgram):
            # OP_0 <programa>
            return bytes([Opcodes.small_int(destination.version)]) + ScriptBuilder.push_data(destination.program)

        raise TypeError(f"Variante de destino desconocida: {type(destination)}")

    @staticmethod
    def address_to_script(address: str, decoder: AddressDecoder) -> bytes:
        """Decodifica la dirección (InvalidAddress si falla) y construye su scriptPubKey."""
        return ScriptBuilder.build_output_script(decoder.decode(address))

    @staticmethod
    def witness_commitment_script(commitment_hex: Optional[str]) -> Optional[bytes]:
        """El daemon entrega el script completo (OP_RETURN ...). Se usa tal cual."""
        if not commitment_hex:
            return None

        try:
            script = bytes.fromhex(commitment_hex)
        except ValueError as e:
            raise GenerationError(f"default_witness_commitment no es hexadecimal: {commitment_hex!r}") from e

        if not script or script[0] != Opcodes.OP_RETURN:
            raise GenerationError("default_witness_commitment no es un script OP_RETURN.")
        return script
