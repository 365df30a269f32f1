# horecascan/core/logging.py
# -----------------------------------------------------------------------------
# Loguru based logging setup
# - rotation/retention/backtrace from settings
# - call once from the embedding application; library modules only log
# -----------------------------------------------------------------------------
from pathlib import Path
from typing import Optional

from loguru import logger

from horecascan.core.config import settings


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Optional[str] = None,
    enqueue: bool = True,
) -> Path:
    """Replace loguru's default stderr handler with a rotating file sink.

    Returns the path of the log file.
    """
    log_dir = Path(log_dir or settings.LOG_DIR)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / "app.log"

    logger.remove()  # drop the default handler
    logger.add(
        log_file,
        rotation=settings.LOG_ROTATION,
        retention=settings.LOG_RETENTION,
        enqueue=enqueue,  # multiprocess safe
        backtrace=True,
        diagnose=True,
        level=level or settings.LOG_LEVEL,
    )
    return log_file
