# interface/api.py
from flask import Blueprint, current_app, jsonify, request

from application.cluster_plot_service import ClusterPlotService, PlotStyle
from integration.dataset_loader import DataLoadFailure

api_bp = Blueprint("api", __name__, url_prefix="/api")

LOAD_ERROR_MESSAGE = "Error loading data. Please try again."


def _service() -> ClusterPlotService:
    return current_app.extensions["cluster_plot_service"]


@api_bp.errorhandler(DataLoadFailure)
def handle_load_failure(exc: DataLoadFailure):
    current_app.logger.error("Error loading data: %s", exc)
    return jsonify({"error": LOAD_ERROR_MESSAGE}), 503


@api_bp.route("/size-variables")
def get_size_variables():
    return jsonify({"options": _service().size_variables()})


@api_bp.route("/plot")
def get_plot():
    """
    Gotowy trace + layout + config dla Plotly.

    Parametry:
      ?size=gov_debt        (nieznana nazwa -> inflation_rate)
      ?variant=detailed|basic
    """
    style = PlotStyle.from_variant(
        request.args.get("variant"),
        width=current_app.config["PLOT_WIDTH"],
        height=current_app.config["PLOT_HEIGHT"],
    )
    return jsonify(_service().render(request.args.get("size"), style))


@api_bp.route("/clusters")
def get_clusters():
    return jsonify({"clusters": _service().cluster_stats()})


@api_bp.route("/records")
def get_records():
    records = _service().records()
    return jsonify({"count": len(records), "records": [r.to_dict() for r in records]})


@api_bp.route("/reload", methods=["POST"])
def reload_records():
    records = _service().reload()
    return jsonify({"source": _service().source, "count": len(records)})
