# tools/export_cluster_plot.py
"""
Zapisuje wykres 3D jako samodzielny plik HTML (bez serwera Flask),
z tego samego trace/layout co /api/plot.

Uruchomienie:
    python -m tools.export_cluster_plot --size gov_debt --variant basic out/clusters.html
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import plotly.graph_objects as go
import plotly.io as pio

from application.cluster_plot_service import ClusterPlotService, PlotStyle
from core.config import Config
from integration.dataset_loader import DatasetLoader

logger = logging.getLogger(__name__)


def render_payload(service: ClusterPlotService, size: Optional[str], variant: Optional[str]) -> Dict[str, Any]:
    return service.render(size, PlotStyle.from_variant(variant, width=Config.PLOT_WIDTH, height=Config.PLOT_HEIGHT))


def build_figure(payload: Dict[str, Any]) -> go.Figure:
    return go.Figure(data=payload["data"], layout=payload["layout"])


def export_plot(output: Path, size: Optional[str] = None, variant: Optional[str] = None,
                source: Optional[str] = None) -> Path:
    service = ClusterPlotService(loader=DatasetLoader(source=source))
    payload = render_payload(service, size, variant)
    fig = build_figure(payload)

    output.parent.mkdir(parents=True, exist_ok=True)
    pio.write_html(
        fig,
        file=str(output),
        config=payload["config"],
        include_plotlyjs="cdn",
        full_html=True,
    )
    logger.info("Plot written to: %s", output.resolve())
    return output


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Export the 3D cluster plot to a standalone HTML file.")
    parser.add_argument("output", type=Path)
    parser.add_argument("--size", default=None, help="size variable (default: DEFAULT_SIZE_VARIABLE)")
    parser.add_argument("--variant", choices=["detailed", "basic"], default="detailed")
    parser.add_argument("--source", default=None, help="dataset path or URL (default: DATA_SOURCE)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    export_plot(args.output, size=args.size, variant=args.variant, source=args.source)


if __name__ == "__main__":
    main()
