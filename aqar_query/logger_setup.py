import logging

from aqar_query.config import app_config

_logger_initialized = False


def _resolve_level() -> int:
    if app_config.is_debug_logging:
        return logging.DEBUG
    level = logging.getLevelName(app_config.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    global _logger_initialized
    logger = logging.getLogger(name)

    if not _logger_initialized:
        level = _resolve_level()
        logger.setLevel(level)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(formatter)
        logging.getLogger().addHandler(console_handler)
        logging.getLogger().setLevel(level)
        _logger_initialized = True

    return logger
