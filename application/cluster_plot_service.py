# application/cluster_plot_service.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional
import logging

from core.config import Config
from domain.aggregation import aggregate_clusters
from domain.encoding import SizeSelector, build_geometry, resolve_size_variable
from domain.models import (
    CLUSTER_COLORSCALE,
    CLUSTER_IDS,
    CLUSTER_TICK_TEXT,
    CountryRecord,
    RenderGeometry,
    SizeVariable,
)
from integration.dataset_loader import DatasetLoader

logger = logging.getLogger(__name__)

MODE_BAR_BUTTONS_TO_REMOVE = ["pan2d", "lasso2d", "select2d"]


@dataclass(frozen=True)
class PlotStyle:
    """Jeden komponent wykresu zamiast dwóch wariantów – różnią się tylko tymi polami."""

    title: str = "Cluster Visualization in 3D PCA"
    width: int = 800
    height: int = 600
    title_color: str = "#2c3e50"
    scene_background: str = "#f5f5f5"
    grid_color: str = "gray"
    compact_hover: bool = False
    show_stats: bool = True

    @classmethod
    def detailed(cls, **overrides: Any) -> "PlotStyle":
        return cls(**overrides)

    @classmethod
    def basic(cls, **overrides: Any) -> "PlotStyle":
        return replace(cls(compact_hover=True, show_stats=False), **overrides)

    @classmethod
    def from_variant(cls, variant: Optional[str], **overrides: Any) -> "PlotStyle":
        if (variant or "").lower() == "basic":
            return cls.basic(**overrides)
        return cls.detailed(**overrides)


def build_trace(geometry: RenderGeometry) -> Dict[str, Any]:
    return {
        "x": list(geometry.x),
        "y": list(geometry.y),
        "z": list(geometry.z),
        "mode": "markers",
        "type": "scatter3d",
        "marker": {
            "size": list(geometry.sizes),
            "color": list(geometry.colors),
            "colorscale": CLUSTER_COLORSCALE,
            "cmin": min(CLUSTER_IDS),
            "cmax": max(CLUSTER_IDS),
            "colorbar": {
                "title": {"text": "Cluster", "side": "right"},
                "thickness": 15,
                "len": 0.5,
                "tickvals": list(CLUSTER_IDS),
                "ticktext": list(CLUSTER_TICK_TEXT),
            },
            "line": {"color": "rgba(0,0,0,0.3)", "width": 1},
            "opacity": 0.9,
        },
        "text": list(geometry.texts),
        "hoverinfo": "text",
        "showlegend": False,
    }


def _axis(title: str, style: PlotStyle) -> Dict[str, Any]:
    return {
        "title": {"text": title},
        "gridcolor": style.grid_color,
        "zerolinecolor": style.grid_color,
        "showbackground": True,
        "backgroundcolor": style.scene_background,
    }


def build_layout(selector: SizeSelector, style: PlotStyle) -> Dict[str, Any]:
    variable = resolve_size_variable(selector)
    return {
        "title": {
            "text": f"{style.title} (Point Size: {variable.label})",
            "font": {"size": 18, "color": style.title_color},
        },
        "scene": {
            "xaxis": _axis("PC1", style),
            "yaxis": _axis("PC2", style),
            "zaxis": _axis("PC3", style),
            "camera": {"eye": {"x": 1.5, "y": 1.5, "z": 1.5}},
        },
        "width": style.width,
        "height": style.height,
        "margin": {"l": 0, "r": 0, "b": 0, "t": 50, "pad": 4},
        "paper_bgcolor": "white",
        "plot_bgcolor": "white",
    }


def build_plot_config(display_mode_bar: bool = True) -> Dict[str, Any]:
    return {
        "responsive": True,
        "displayModeBar": display_mode_bar,
        "modeBarButtonsToRemove": list(MODE_BAR_BUTTONS_TO_REMOVE),
    }


def cluster_stats_payload(records: List[CountryRecord]) -> Dict[str, Dict[str, Any]]:
    return {str(cid): summary.to_dict() for cid, summary in aggregate_clusters(records).items()}


class ClusterPlotService:
    """
    Kontroler sesji: trzyma zbiór rekordów (ładowany raz) i przy każdej zmianie
    selektora przelicza całość od zera – bez cache'owania wyników pochodnych.
    """

    def __init__(self,
                 loader: Optional[DatasetLoader] = None,
                 display_mode_bar: Optional[bool] = None,
                 default_size_variable: Optional[str] = None) -> None:
        self._loader = loader or DatasetLoader()
        self._records: Optional[List[CountryRecord]] = None
        self.display_mode_bar = Config.PLOT_DISPLAY_MODE_BAR if display_mode_bar is None else display_mode_bar
        self.default_size_variable = resolve_size_variable(default_size_variable or Config.DEFAULT_SIZE_VARIABLE)

    @property
    def source(self) -> str:
        return self._loader.source

    def records(self) -> List[CountryRecord]:
        # DataLoadFailure leci dalej – nic nie zostaje zapamiętane po błędzie
        if self._records is None:
            self._records = self._loader.load()
        return self._records

    def reload(self) -> List[CountryRecord]:
        logger.info("Reloading dataset from %s", self.source)
        self._records = None
        return self.records()

    def size_variables(self) -> List[Dict[str, Any]]:
        return [
            {"value": v.value, "label": v.label, "default": v is self.default_size_variable}
            for v in SizeVariable
        ]

    def cluster_stats(self) -> Dict[str, Dict[str, Any]]:
        return cluster_stats_payload(self.records())

    def render(self, size_variable: SizeSelector = None, style: Optional[PlotStyle] = None) -> Dict[str, Any]:
        style = style or PlotStyle.detailed(width=Config.PLOT_WIDTH, height=Config.PLOT_HEIGHT)
        variable = resolve_size_variable(size_variable or self.default_size_variable)
        records = self.records()

        geometry = build_geometry(records, variable, compact_hover=style.compact_hover)
        payload: Dict[str, Any] = {
            "size_variable": variable.value,
            "size_variable_label": variable.label,
            "data": [build_trace(geometry)],
            "layout": build_layout(variable, style),
            "config": build_plot_config(self.display_mode_bar),
        }
        if style.show_stats:
            payload["stats"] = cluster_stats_payload(records)
        return payload
