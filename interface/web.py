# interface/web.py
from flask import Blueprint, current_app, render_template

from domain.models import SizeVariable

web_bp = Blueprint("web", __name__)


@web_bp.route("/")
def index():
    # Strona z wykresem – /static/js/main.js pobiera /api/plot i rysuje Plotly
    service = current_app.extensions["cluster_plot_service"]
    return render_template(
        "index.html",
        page_title=current_app.config["PAGE_TITLE"],
        size_variables=list(SizeVariable),
        default_size_variable=service.default_size_variable.value,
    )
