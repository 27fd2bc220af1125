import pytest

from application.cluster_plot_service import (
    ClusterPlotService,
    PlotStyle,
    build_layout,
    build_plot_config,
    build_trace,
)
from domain.encoding import build_geometry
from integration.dataset_loader import DataLoadFailure


class StubLoader:
    source = "stub://records"

    def __init__(self, records=None, error=None):
        self.records = records
        self.error = error
        self.calls = 0

    def load(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def service(scenario_records):
    return ClusterPlotService(loader=StubLoader(scenario_records), display_mode_bar=True,
                              default_size_variable="inflation_rate")


class TestPlotAssembly:

    def test_trace(self, scenario_records):
        trace = build_trace(build_geometry(scenario_records, "gov_debt"))
        assert trace["type"] == "scatter3d"
        assert trace["mode"] == "markers"
        assert trace["hoverinfo"] == "text"
        assert trace["showlegend"] is False
        assert trace["x"] == [1.0, -1.0, 0.5]
        marker = trace["marker"]
        assert marker["color"] == [0, 0, 1]
        assert marker["size"] == [1500.0, 1500.0, 1500.0]
        assert (marker["cmin"], marker["cmax"]) == (0, 2)
        assert marker["colorbar"]["tickvals"] == [0, 1, 2]
        assert marker["colorbar"]["ticktext"] == ["Cluster 0", "Cluster 1", "Cluster 2"]
        assert len(trace["text"]) == 3

    def test_legend_fixed_for_sparse_clusters(self, scenario_records):
        trace = build_trace(build_geometry(scenario_records[:1], "gov_debt"))
        assert trace["marker"]["colorbar"]["ticktext"] == ["Cluster 0", "Cluster 1", "Cluster 2"]

    def test_layout(self):
        layout = build_layout("gdp_growth", PlotStyle.detailed(width=1000, height=700))
        assert layout["title"]["text"].endswith("(Point Size: GDP Growth)")
        assert layout["scene"]["xaxis"]["title"]["text"] == "PC1"
        assert layout["scene"]["zaxis"]["title"]["text"] == "PC3"
        assert layout["scene"]["camera"]["eye"] == {"x": 1.5, "y": 1.5, "z": 1.5}
        assert (layout["width"], layout["height"]) == (1000, 700)
        assert layout["margin"] == {"l": 0, "r": 0, "b": 0, "t": 50, "pad": 4}

    def test_layout_unknown_selector(self):
        assert "Inflation Rate" in build_layout("nope", PlotStyle())["title"]["text"]

    def test_config(self):
        assert build_plot_config(False) == {
            "responsive": True,
            "displayModeBar": False,
            "modeBarButtonsToRemove": ["pan2d", "lasso2d", "select2d"],
        }

    def test_variants(self):
        assert PlotStyle.from_variant("basic").compact_hover is True
        assert PlotStyle.from_variant("basic").show_stats is False
        assert PlotStyle.from_variant("detailed").show_stats is True
        assert PlotStyle.from_variant(None) == PlotStyle.detailed()
        assert PlotStyle.basic(width=500).width == 500


class TestClusterPlotService:

    def test_render_detailed(self, service):
        payload = service.render("political_risk")
        assert payload["size_variable"] == "political_risk"
        assert payload["size_variable_label"] == "Political Risk"
        assert len(payload["data"]) == 1
        assert payload["config"]["displayModeBar"] is True
        assert set(payload["stats"]) == {"0", "1"}
        assert payload["stats"]["0"]["countries"] == ["A", "B"]

    def test_render_basic_has_no_stats(self, service):
        payload = service.render("gov_debt", PlotStyle.basic())
        assert "stats" not in payload
        assert "Gov Debt" not in payload["data"][0]["text"][0]

    def test_unknown_selector_renders_inflation(self, service):
        assert service.render("bogus")["data"] == service.render("inflation_rate")["data"]
        assert service.render("bogus")["size_variable"] == "inflation_rate"

    def test_default_selector(self, scenario_records):
        svc = ClusterPlotService(loader=StubLoader(scenario_records), default_size_variable="gov_debt")
        assert svc.render()["size_variable"] == "gov_debt"
        defaults = [o["value"] for o in svc.size_variables() if o["default"]]
        assert defaults == ["gov_debt"]

    def test_render_is_deterministic(self, service):
        assert service.render("gdp_growth") == service.render("gdp_growth")

    def test_records_loaded_once(self, service):
        service.render("gdp_growth")
        service.render("gov_debt")
        service.cluster_stats()
        assert service._loader.calls == 1

    def test_reload(self, service):
        service.records()
        service.reload()
        assert service._loader.calls == 2

    def test_load_failure_propagates_and_is_not_cached(self, scenario_records):
        loader = StubLoader(error=DataLoadFailure("stub://records", "HTTP 500"))
        svc = ClusterPlotService(loader=loader)
        with pytest.raises(DataLoadFailure):
            svc.render("gov_debt")

        loader.error = None
        loader.records = scenario_records
        assert len(svc.records()) == 3
        assert loader.calls == 2

    def test_size_variables(self, service):
        options = service.size_variables()
        assert len(options) == 9
        assert options[0] == {"value": "inflation_rate", "label": "Inflation Rate", "default": True}
