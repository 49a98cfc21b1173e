import os
import sys
import json
import argparse
import logging

from typing import Any

from dotenv import load_dotenv

# =========================================================
# ⚡ CONFIGURACIÓN INICIAL DEL SISTEMA
# =========================================================

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.append(ROOT_DIR)

import logger_config

from gpc.core.config.config_manager import ConfigManager
from gpc.core.config.paths import Paths
from gpc.core.exceptions import GenerationError
from gpc.core.managers.job_manager import JobManager
from gpc.core.services.extra_nonce import ExtraNonce

logger = logging.getLogger()

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def load_json(path: str, label: str) -> dict[str, Any]:
    """Carga un archivo JSON (configuración o plantilla)."""
    if not os.path.exists(path):
        candidate = os.path.join(ROOT_DIR, 'config', path)
        if not os.path.exists(candidate):
            logger.critical(f"❌ No existe el archivo de {label}: {path}")
            sys.exit(1)
        path = candidate

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ JSON Corrupto en {path}: {e}")
        sys.exit(1)

def write_job(job: dict[str, Any]) -> str:
    path = os.path.join(str(Paths.JOBS_DIR), "current_job.json")
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(job, f, indent=2)
    return path

# =========================================================
# 🚀 PUNTO DE ENTRADA
# =========================================================

def main() -> int:
    parser = argparse.ArgumentParser(description="Construye la Coinbase partida (coinb1/coinb2) de un trabajo de minería.")
    parser.add_argument("--config", default="pool.json", help="Archivo JSON de configuración del pool")
    parser.add_argument("--template", required=True, help="Salida JSON de getblocktemplate")
    parser.add_argument("--env", default=None, help="Archivo .env alternativo")
    parser.add_argument("--timestamp", type=int, default=None, help="Timestamp fijo para el scriptSig (reproducible)")
    args = parser.parse_args()

    if args.env:
        load_dotenv(args.env, override=True)

    log_file = logger_config.setup_logging()
    print(f"📝 Log de sesión guardado en: {log_file}", file=sys.stderr)

    config = ConfigManager()
    try:
        config.load_from_json_dict(load_json(args.config, "configuración"))
    except GenerationError as e:
        logger.critical(f"❌ Configuración inválida: {e}")
        return 1

    template = load_json(args.template, "plantilla")

    extra_nonce = ExtraNonce(
        instance_id=config.pool.instance_id,
        extranonce1_size=config.pool.extranonce1_size,
        extranonce2_size=config.pool.extranonce2_size
    )
    manager = JobManager(extra_nonce, config)

    try:
        job = manager.on_new_template(template, timestamp=args.timestamp)
    except GenerationError as e:
        logger.critical(f"❌ Trabajo rechazado: {e}")
        return 1

    job_path = write_job(job.to_dict())
    logger.info(f"Trabajo escrito en {job_path}")

    print(json.dumps(job.to_dict(), indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())
