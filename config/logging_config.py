# config/logging_config.py
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Логгеры сервера: конвейер, клиенты API, обработчики ошибок
APP_LOGGERS = (
    "server",
    "process_manager",
    "data_fetcher",
    "formatter",
    "api_client",
    "error_handler",
)
# Логгеры uvicorn пишут через root, без собственных обработчиков
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None):
    """
    Логи сервера: файл logs/app.log (ротация 10 МБ × 5) и консоль.
    Уровень log_level применяется к логгерам сервера; запросы провайдерам
    (httpx) видны только начиная с WARNING.
    """
    log_dir = log_dir or Path(__file__).parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)

        root.addHandler(file_handler)
        root.addHandler(console_handler)

    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    # URL запросов и так пишет api_client (с замаскированными ключами)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger("server").info(f"🔧 Логи пишутся в {log_dir / 'app.log'} (уровень {log_level.upper()})")
