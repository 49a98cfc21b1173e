# gpc/core/builders/generation_transaction.py
'''
class GenerationTransaction:
    Transacción de generación (Coinbase) de un trabajo de minería.

    * Tiene exactamente un input, cuyo OutPoint es el nulo (hash cero, índice 0xFFFFFFFF).
    * Se entrega partida en dos buffers inmutables alrededor del extra-nonce:

          initial ++ <extranonce1> ++ <extranonce2> ++ final

      es una transacción completa, lista para hashear, sin reconstruirla por minero.

    Methods::
        create(): Serializa 'initial' y 'final'. Si algo falla no se expone ningún buffer.
        assemble(extranonce1, extranonce2) -> bytes: Une las partes con los extra-nonces del minero.
        coinbase_hash(extranonce1, extranonce2) -> str: TXID (big-endian) de la transacción unida.
'''

import time
import logging
from typing import List, Optional, Sequence, Tuple

from gpc.core.config.config_manager import ConfigManager
from gpc.core.config.protocol_constants import ProtocolConstants
from gpc.core.config.reward_config import RewardRecipient
from gpc.core.exceptions import EncodingOverflow, GenerationError
from gpc.core.interfaces.i_extra_nonce import IExtraNonce
from gpc.core.models.block_template import BlockTemplate
from gpc.core.models.outputs import OutputSet
from gpc.core.models.tx_input import TxInput
from gpc.core.scripting.script_builder import ScriptBuilder
from gpc.core.services.reward_distributor import RewardDistributor, RewardShare
from gpc.core.services.transaction_hasher import TransactionHasher
from gpc.core.utils.binary_encoder import BinaryEncoder
from gpc.infra.identity.address_decoder import AddressDecoder

logger = logging.getLogger(__name__)

class GenerationTransaction:

    def __init__(
        self,
        extra_nonce: IExtraNonce,
        block_template: BlockTemplate,
        recipients: Sequence[RewardRecipient],
        pool_wallet_address: str,
        decoder: AddressDecoder,
        pool_tag: str = "/gpc/",
        support_tx_messages: bool = False,
        tx_message: str = "",
        timestamp: Optional[int] = None
    ) -> None:
        self._extra_nonce = extra_nonce
        self._block_template = block_template
        self._recipients: List[RewardRecipient] = list(recipients)
        self._pool_wallet_address = pool_wallet_address
        self._decoder = decoder
        self._pool_tag = pool_tag
        self._support_tx_messages = support_tx_messages
        self._tx_message = tx_message

        # La versión fija si la tx lleva mensaje: se decide aquí, nunca según el contenido
        self._version: int = (
            ProtocolConstants.TX_VERSION_WITH_MESSAGE if support_tx_messages else ProtocolConstants.TX_VERSION
        )
        self._lock_time: int = ProtocolConstants.LOCK_TIME
        self._timestamp: int = int(time.time()) if timestamp is None else timestamp

        # scriptSig y mensaje se codifican en create(): cualquier error aborta ahí
        self._input: Optional[TxInput] = None
        self._message: Optional[bytes] = None
        self._outputs: Optional[OutputSet] = None
        self._shares: List[RewardShare] = []
        self._initial: Optional[bytes] = None
        self._final: Optional[bytes] = None

    @classmethod
    def from_config(
        cls,
        extra_nonce: IExtraNonce,
        block_template: BlockTemplate,
        config: ConfigManager,
        timestamp: Optional[int] = None
    ) -> 'GenerationTransaction':
        return cls(
            extra_nonce=extra_nonce,
            block_template=block_template,
            recipients=config.rewards.recipients,
            pool_wallet_address=config.rewards.pool_wallet_address,
            decoder=AddressDecoder(config.network.network),
            pool_tag=config.pool.pool_tag,
            support_tx_messages=config.pool.support_tx_messages,
            tx_message=config.pool.tx_message,
            timestamp=timestamp
        )

    # --- Getters ---
    @property
    def version(self) -> int: return self._version
    @property
    def tx_input(self) -> Optional[TxInput]: return self._input
    @property
    def outputs(self) -> Optional[OutputSet]: return self._outputs
    @property
    def shares(self) -> List[RewardShare]: return self._shares[:]
    @property
    def lock_time(self) -> int: return self._lock_time
    @property
    def message(self) -> Optional[bytes]: return self._message
    @property
    def timestamp(self) -> int: return self._timestamp
    @property
    def block_template(self) -> BlockTemplate: return self._block_template
    @property
    def initial(self) -> Optional[bytes]: return self._initial
    @property
    def final(self) -> Optional[bytes]: return self._final
    @property
    def initial_hex(self) -> str: return self._require_created()[0].hex()
    @property
    def final_hex(self) -> str: return self._require_created()[1].hex()

    @property
    def extra_nonce_length(self) -> int:
        return len(self._extra_nonce.extra_nonce_placeholder)

    def create(self) -> None:
        try:
            # 1. scriptSig partido y mensaje opcional
            script = ScriptBuilder.build_signature_script(
                height=self._block_template.height,
                aux_flags=self._block_template.coinbase_aux.flags_bytes,
                timestamp=self._timestamp,
                extra_nonce_length=self.extra_nonce_length,
                pool_tag=self._pool_tag
            )
            tx_in = TxInput(signature_script=script)
            message = ScriptBuilder.serialize_string(self._tx_message) if self._support_tx_messages else None

            # 2. Primera parte: versión + input hasta el inicio del extra-nonce
            head = bytearray()
            head.extend(BinaryEncoder.write_u32_le(self._version))
            head.extend(BinaryEncoder.varint(1))
            head.extend(BinaryEncoder.write_bytes(tx_in.previous_output.hash))
            head.extend(BinaryEncoder.write_u32_le(tx_in.previous_output.index))

            # La longitud declarada incluye el extra-nonce que el minero insertará después
            head.extend(BinaryEncoder.varint(script.declared_length))
            head.extend(script.initial)

            # 3. Reparto de la recompensa
            outputs = OutputSet(self._decoder)
            shares = RewardDistributor.distribute(
                self._block_template.coinbase_value,
                self._recipients,
                self._pool_wallet_address
            )
            for share in shares:
                outputs.add(share.address, share.amount)

            commitment = ScriptBuilder.witness_commitment_script(self._block_template.default_witness_commitment)
            if commitment is not None:
                outputs.add_script(commitment, 0)

            # 4. Segunda parte: cierre del input, outputs, locktime y mensaje
            tail = bytearray()
            tail.extend(script.final)
            tail.extend(BinaryEncoder.write_u32_le(tx_in.sequence))

            tail.extend(BinaryEncoder.varint(outputs.count))
            tail.extend(outputs.serialize())

            tail.extend(BinaryEncoder.write_u32_le(self._lock_time))

            if message is not None:
                tail.extend(message)

            # Solo se publica cuando ambas partes están completas
            self._input = tx_in
            self._message = message
            self._outputs = outputs
            self._shares = shares
            self._initial = bytes(head)
            self._final = bytes(tail)

            logger.info(
                f"Coinbase preparada: #{self._block_template.height} | "
                f"initial {len(self._initial)}B + extra-nonce {script.extra_nonce_length}B + final {len(self._final)}B"
            )

        except Exception:
            logger.exception(f"Error fatal creando la transacción de generación para bloque #{self._block_template.height}")
            raise

    def _require_created(self) -> Tuple[bytes, bytes]:
        if self._initial is None or self._final is None:
            raise GenerationError("La transacción de generación aún no fue creada (llamar a create()).")
        return self._initial, self._final

    def assemble(self, extranonce1: bytes, extranonce2: bytes) -> bytes:
        initial, final = self._require_created()

        if len(extranonce1) + len(extranonce2) != self.extra_nonce_length:
            raise EncodingOverflow(
                f"Extra-nonce de {len(extranonce1) + len(extranonce2)} bytes; "
                f"se declararon {self.extra_nonce_length}."
            )
        return initial + extranonce1 + extranonce2 + final

    def coinbase_hash(self, extranonce1: bytes, extranonce2: bytes) -> str:
        return TransactionHasher.calculate(self.assemble(extranonce1, extranonce2))
