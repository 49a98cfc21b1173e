# gpc/core/validators/generation_validator.py

import logging

from gpc.core.builders.generation_transaction import GenerationTransaction
from gpc.core.config.protocol_constants import ProtocolConstants
from gpc.core.exceptions import GenerationError
from gpc.core.models.tx_input import OutPoint
from gpc.core.services.transaction_decoder import TransactionDecoder

logger = logging.getLogger(__name__)

class GenerationValidator:
    """
    Verificación estructural de la transacción de generación ya partida.
    Une las partes con un extra-nonce nulo y relee la transacción completa.
    """

    @staticmethod
    def validate(generation_tx: GenerationTransaction) -> bool:
        height = generation_tx.block_template.height
        try:
            filler = b"\x00" * generation_tx.extra_nonce_length
            raw = generation_tx.assemble(filler, b"")
            tx = TransactionDecoder.decode(raw)
        except GenerationError:
            logger.exception(f"Rechazo Coinbase: no se pudo releer la transacción del bloque {height}.")
            return False

        if len(tx.inputs) != 1:
            logger.info(f"Rechazo Coinbase: {len(tx.inputs)} inputs en bloque {height} (se espera 1).")
            return False

        tx_in = tx.inputs[0]
        if not OutPoint(tx_in.previous_hash, tx_in.previous_index).is_null:
            logger.info(f"Rechazo Coinbase: OutPoint no nulo en bloque {height}.")
            return False

        if tx_in.script_length != generation_tx.tx_input.signature_script.declared_length:
            logger.info(
                f"Rechazo Coinbase: longitud de scriptSig {tx_in.script_length} "
                f"!= declarada {generation_tx.tx_input.signature_script.declared_length}."
            )
            return False

        if not ProtocolConstants.MIN_COINBASE_SCRIPT_SIZE <= tx_in.script_length <= ProtocolConstants.MAX_COINBASE_SCRIPT_SIZE:
            logger.info(f"Rechazo Coinbase: scriptSig de {tx_in.script_length} bytes fuera de consenso.")
            return False

        expected_total = generation_tx.block_template.coinbase_value
        if tx.total_output != expected_total:
            logger.info(
                f"Rechazo Coinbase: Salidas suman {tx.total_output}, "
                f"la plantilla paga {expected_total}."
            )
            return False

        expected_trailing = generation_tx.message or b""
        if tx.trailing != expected_trailing:
            logger.info(f"Rechazo Coinbase: {len(tx.trailing)} bytes inesperados tras el locktime.")
            return False

        logger.info(f"Coinbase bloque {height} verificada.")
        return True
