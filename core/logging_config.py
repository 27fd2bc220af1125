# core/logging_config.py
import logging
from flask import Flask


def configure_logging(app: Flask) -> None:
    """Logowanie: poziom z LOG_LEVEL, jeden wspólny format dla aplikacji i bibliotek."""
    log_level_name = app.config.get("LOG_LEVEL", "INFO")
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # requests/urllib3 loguje każde połączenie na DEBUG
    logging.getLogger("urllib3").setLevel(max(log_level, logging.WARNING))

    app.logger.setLevel(log_level)
    app.logger.info(
        "Logging configured, level=%s, data source=%s",
        log_level_name,
        app.config.get("DATA_SOURCE"),
    )
