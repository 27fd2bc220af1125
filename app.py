# app.py
from typing import Optional

from flask import Flask

from application.cluster_plot_service import ClusterPlotService
from core.config import Config
from core.logging_config import configure_logging
from integration.dataset_loader import DatasetLoader
from interface.api import api_bp
from interface.web import web_bp


def create_app(config_overrides: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)

    # jeden zbiór danych na proces, ładowany przy pierwszym żądaniu
    loader = DatasetLoader(
        source=app.config["DATA_SOURCE"],
        timeout=app.config["DATA_FETCH_TIMEOUT"],
    )
    app.extensions["cluster_plot_service"] = ClusterPlotService(
        loader=loader,
        display_mode_bar=app.config["PLOT_DISPLAY_MODE_BAR"],
        default_size_variable=app.config["DEFAULT_SIZE_VARIABLE"],
    )

    # rejestracja blueprintów
    app.register_blueprint(web_bp)
    app.register_blueprint(api_bp)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
