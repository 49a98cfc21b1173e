# logger_config.py
import logging
import os
import glob
import sys
from typing import List

from gpc.core.config.paths import Paths

def setup_logging(level: int = logging.INFO) -> str:
    # 1. Ruta: 'data/logs' (o GPC_DATA_DIR/logs)
    Paths.ensure_directories_exist()
    log_dir = str(Paths.LOGS_DIR)

    # 2. Rotación de Archivos: siguiente número libre (pool_0.log, pool_1.log...)
    existentes: List[str] = glob.glob(os.path.join(log_dir, "pool_*.log"))
    indices: List[int] = []
    for archivo in existentes:
        try:
            num = int(archivo.split('_')[-1].split('.')[0])
            indices.append(num)
        except (ValueError, IndexError): continue

    siguiente: int = max(indices) + 1 if indices else 0
    nombre_archivo: str = os.path.join(log_dir, f"pool_{siguiente}.log")

    # 3. Configurar el Root Logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Limpiamos handlers anteriores para evitar duplicados si se llama dos veces
    root_logger.handlers = []

    # --- CANAL 1: ARCHIVO (Todo el historial detallado) ---
    fh = logging.FileHandler(nombre_archivo, encoding='utf-8')
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'))

    # --- CANAL 2: TERMINAL (Solo ERRORES o CRÍTICOS) ---
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.ERROR)
    ch.setFormatter(logging.Formatter('\n❌ ERROR EN: %(name)s | Línea: %(lineno)d\nDetalle: %(message)s\n'))

    root_logger.addHandler(fh)
    root_logger.addHandler(ch)

    return nombre_archivo
