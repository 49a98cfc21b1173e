# gpc/core/managers/job_manager.py

import logging
import threading
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from gpc.core.builders.generation_transaction import GenerationTransaction
from gpc.core.config.config_manager import ConfigManager
from gpc.core.exceptions import GenerationError, SupersededTemplate
from gpc.core.interfaces.i_extra_nonce import IExtraNonce
from gpc.core.models.block_template import BlockTemplate
from gpc.core.validators.generation_validator import GenerationValidator

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class MiningJob:
    """Datos de un trabajo que la capa Stratum difunde a todos los mineros."""
    job_id: str
    height: int
    coinb1: str
    coinb2: str
    extranonce_length: int
    extranonce2_size: int
    previous_block_hash: Optional[str]
    bits: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class JobManager:
    """
    Construye un trabajo por cada plantilla nueva.
    Si la construcción falla el trabajo anterior se mantiene y el error se propaga:
    nunca se publica una Coinbase a medio construir.
    Las construcciones pueden solaparse; solo se publica la de la plantilla más
    reciente y las anteriores se descartan con SupersededTemplate.
    """

    def __init__(self, extra_nonce: IExtraNonce, config: Optional[ConfigManager] = None) -> None:
        self._extra_nonce = extra_nonce
        self._config = config if config is not None else ConfigManager()
        self._lock = threading.Lock()
        self._job_counter: int = 0
        self._template_seq: int = 0
        self._published_seq: int = 0
        self._current_job: Optional[MiningJob] = None

        logger.info("Gestor de trabajos listo.")

    @property
    def current_job(self) -> Optional[MiningJob]:
        with self._lock:
            return self._current_job

    def on_new_template(
        self,
        template: Union[BlockTemplate, Dict[str, Any]],
        timestamp: Optional[int] = None
    ) -> MiningJob:
        try:
            block_template = template if isinstance(template, BlockTemplate) else BlockTemplate.model_validate(template)
        except ValidationError as e:
            logger.error(f"Plantilla de bloque rechazada: {e}")
            raise GenerationError(f"Plantilla de bloque inválida: {e}") from e

        with self._lock:
            self._template_seq += 1
            seq = self._template_seq

        logger.info(f"Preparando trabajo para bloque #{block_template.height}...")

        generation_tx = GenerationTransaction.from_config(
            self._extra_nonce, block_template, self._config, timestamp=timestamp
        )
        generation_tx.create()

        if not GenerationValidator.validate(generation_tx):
            raise GenerationError(f"Coinbase del bloque #{block_template.height} no superó la verificación.")

        with self._lock:
            if seq < self._published_seq:
                logger.info(f"Trabajo del bloque #{block_template.height} descartado: existe uno más reciente.")
                raise SupersededTemplate(
                    f"La plantilla del bloque #{block_template.height} fue reemplazada durante su construcción."
                )

            self._published_seq = seq
            self._job_counter += 1
            job = MiningJob(
                job_id=f"{self._job_counter:x}",
                height=block_template.height,
                coinb1=generation_tx.initial_hex,
                coinb2=generation_tx.final_hex,
                extranonce_length=generation_tx.extra_nonce_length,
                extranonce2_size=self._extra_nonce.extranonce2_size,
                previous_block_hash=block_template.previous_block_hash,
                bits=block_template.bits
            )
            self._current_job = job

        logger.info(f"Trabajo {job.job_id} publicado (bloque #{job.height}).")
        return job
