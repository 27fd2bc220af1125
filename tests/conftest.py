import json

import pytest

from app import create_app
from domain.models import CountryRecord

BASE_ROW = {
    "country_code": "XXX",
    "name": "Country",
    "PC1": 0.0,
    "PC2": 0.0,
    "PC3": 0.0,
    "cluster": 0,
    "inflation_rate": 0.02,
    "policy_rate": 0.01,
    "unemployment_rate": 0.05,
    "gdp_growth": 0.03,
    "producer_inflation": 0.02,
    "real_effective_exchange_rate": 1.0,
    "equity_risk_premium": 5.0,
    "gov_debt": 60.0,
    "political_risk": 70.0,
}


def make_row(**overrides):
    row = dict(BASE_ROW)
    row.update(overrides)
    return row


def make_record(**overrides) -> CountryRecord:
    return CountryRecord.from_dict(make_row(**overrides))


@pytest.fixture
def scenario_records():
    """Three countries: A and B in cluster 0, C in cluster 1, nothing in cluster 2."""
    return [
        make_record(country_code="AAA", name="A", cluster=0, inflation_rate=0.02,
                    policy_rate=0.01, unemployment_rate=0.05, gdp_growth=0.03, PC1=1.0, PC2=2.0, PC3=3.0),
        make_record(country_code="BBB", name="B", cluster=0, inflation_rate=0.04,
                    policy_rate=0.03, unemployment_rate=0.07, gdp_growth=0.01, PC1=-1.0, PC2=-2.0, PC3=-3.0),
        make_record(country_code="CCC", name="C", cluster=1, inflation_rate=0.10,
                    policy_rate=0.12, unemployment_rate=0.08, gdp_growth=-0.02, PC1=0.5, PC2=0.5, PC3=0.5),
    ]


@pytest.fixture
def dataset_file(tmp_path, scenario_records):
    path = tmp_path / "data.json"
    rows = [r.to_dict() for r in scenario_records]
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


@pytest.fixture
def app(dataset_file):
    app = create_app({"TESTING": True, "DATA_SOURCE": str(dataset_file)})
    return app


@pytest.fixture
def client(app):
    return app.test_client()
