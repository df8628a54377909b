# wavemesh/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.  Все модули пишут в один логгер
# «WaveMesh» с префиксом компонента: "[Parser] ...".
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("WaveMesh")

logger = init_logger()
