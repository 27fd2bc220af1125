# domain/models.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

# Upstream clustering produces exactly three groups; colors and legend are fixed to them.
CLUSTER_IDS: Tuple[int, ...] = (0, 1, 2)

CLUSTER_COLORSCALE = [
    [0, "rgb(75, 0, 130)"],      # dark purple, cluster 0
    [0.5, "rgb(0, 128, 128)"],   # teal, cluster 1
    [1, "rgb(255, 255, 0)"],     # yellow, cluster 2
]
CLUSTER_TICK_TEXT: Tuple[str, ...] = tuple(f"Cluster {c}" for c in CLUSTER_IDS)

INDICATOR_FIELDS: Tuple[str, ...] = (
    "inflation_rate",
    "policy_rate",
    "unemployment_rate",
    "gdp_growth",
    "producer_inflation",
    "real_effective_exchange_rate",
    "equity_risk_premium",
    "gov_debt",
    "political_risk",
)

# legacy names used by the upstream export
FIELD_ALIASES: Dict[str, str] = {
    "negara": "name",
    "real_effective_exchange_rates": "real_effective_exchange_rate",
}


class MalformedRecord(ValueError):
    """Rekord wejściowy bez wymaganego pola albo z wartością nie do skonwertowania."""


class SizeVariable(Enum):
    INFLATION_RATE = "inflation_rate"
    POLICY_RATE = "policy_rate"
    UNEMPLOYMENT_RATE = "unemployment_rate"
    GDP_GROWTH = "gdp_growth"
    PRODUCER_INFLATION = "producer_inflation"
    REAL_EFFECTIVE_EXCHANGE_RATE = "real_effective_exchange_rate"
    EQUITY_RISK_PREMIUM = "equity_risk_premium"
    GOV_DEBT = "gov_debt"
    POLITICAL_RISK = "political_risk"

    @property
    def label(self) -> str:
        return _SIZE_LABELS[self]

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["SizeVariable"]:
        """Nazwa z selektora -> SizeVariable; None dla nieznanych nazw (bez wyjątku)."""
        if not name:
            return None
        key = FIELD_ALIASES.get(name.strip(), name.strip())
        try:
            return cls(key)
        except ValueError:
            return None


_SIZE_LABELS = {
    SizeVariable.INFLATION_RATE: "Inflation Rate",
    SizeVariable.POLICY_RATE: "Policy Rate",
    SizeVariable.UNEMPLOYMENT_RATE: "Unemployment Rate",
    SizeVariable.GDP_GROWTH: "GDP Growth",
    SizeVariable.PRODUCER_INFLATION: "Producer Inflation",
    SizeVariable.REAL_EFFECTIVE_EXCHANGE_RATE: "Real Effective Exchange Rate",
    SizeVariable.EQUITY_RISK_PREMIUM: "Equity Risk Premium",
    SizeVariable.GOV_DEBT: "Gov Debt",
    SizeVariable.POLITICAL_RISK: "Political Risk",
}


def _cluster_id(value: Any) -> Union[int, float]:
    # ułamkowy id zostaje jak jest – rysowany, ale poza domeną klastrów w statystykach
    number = float(value)
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class CountryRecord:
    country_code: str
    name: str
    PC1: float
    PC2: float
    PC3: float
    cluster: Union[int, float]
    inflation_rate: float
    policy_rate: float
    unemployment_rate: float
    gdp_growth: float
    producer_inflation: float
    real_effective_exchange_rate: float
    equity_risk_premium: float
    gov_debt: float
    political_risk: float

    @classmethod
    def from_dict(cls, row: Dict[str, Any], index: int = 0) -> "CountryRecord":
        """
        Buduje rekord z jednego obiektu JSON.
        Akceptuje stare nazwy pól (negara, real_effective_exchange_rates).
        """
        if not isinstance(row, dict):
            raise MalformedRecord(f"record #{index}: expected an object, got {type(row).__name__}")

        data = {FIELD_ALIASES.get(k, k): v for k, v in row.items()}

        def _get(field: str) -> Any:
            value = data.get(field)
            if value is None:
                raise MalformedRecord(f"record #{index}: missing field '{field}'")
            return value

        try:
            return cls(
                country_code=str(_get("country_code")),
                name=str(_get("name")),
                PC1=float(_get("PC1")),
                PC2=float(_get("PC2")),
                PC3=float(_get("PC3")),
                cluster=_cluster_id(_get("cluster")),
                **{f: float(_get(f)) for f in INDICATOR_FIELDS},
            )
        except MalformedRecord:
            raise
        except (TypeError, ValueError) as exc:
            raise MalformedRecord(f"record #{index}: {exc}") from exc

    def indicator(self, field: str) -> float:
        return getattr(self, field)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RenderGeometry:
    x: Tuple[float, ...]
    y: Tuple[float, ...]
    z: Tuple[float, ...]
    sizes: Tuple[float, ...]
    colors: Tuple[Union[int, float], ...]
    texts: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.x)


@dataclass(frozen=True)
class ClusterSummary:
    cluster: int
    count: int
    countries: Tuple[str, ...]
    avg_inflation_rate: float
    avg_policy_rate: float
    avg_unemployment_rate: float
    avg_gdp_growth: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cluster": self.cluster,
            "count": self.count,
            "countries": list(self.countries),
            "avgInflation": self.avg_inflation_rate,
            "avgPolicyRate": self.avg_policy_rate,
            "avgUnemployment": self.avg_unemployment_rate,
            "avgGdpGrowth": self.avg_gdp_growth,
        }
