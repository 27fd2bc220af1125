# domain/encoding.py
"""
Mapowanie rekordów krajów na kodowanie wizualne wykresu 3D:
rozmiar markerów, kolor (klaster), tekst tooltipa, geometria.

Czyste funkcje: brak I/O, wejście nigdy nie jest modyfikowane.
"""
from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal
import math
from typing import Dict, Iterable, Tuple, Union

from domain.models import CountryRecord, RenderGeometry, SizeVariable

MIN_MARKER_SIZE = 8.0

# indicator -> (use absolute value, multiplier)
_SIZE_SCALES: Dict[SizeVariable, Tuple[bool, float]] = {
    SizeVariable.POLICY_RATE: (False, 250.0),
    SizeVariable.INFLATION_RATE: (False, 250.0),
    SizeVariable.PRODUCER_INFLATION: (False, 250.0),
    SizeVariable.UNEMPLOYMENT_RATE: (False, 250.0),
    SizeVariable.GDP_GROWTH: (True, 250.0),
    SizeVariable.REAL_EFFECTIVE_EXCHANGE_RATE: (True, 250.0),
    SizeVariable.EQUITY_RISK_PREMIUM: (True, 2.0),
    SizeVariable.GOV_DEBT: (True, 25.0),
    SizeVariable.POLITICAL_RISK: (True, 25.0),
}

SizeSelector = Union[SizeVariable, str, None]


def resolve_size_variable(selector: SizeSelector) -> SizeVariable:
    """Nieznany selektor -> inflation_rate (bez błędu)."""
    if isinstance(selector, SizeVariable):
        return selector
    return SizeVariable.parse(selector) or SizeVariable.INFLATION_RATE


def marker_size(record: CountryRecord, selector: SizeSelector) -> float:
    variable = resolve_size_variable(selector)
    use_abs, multiplier = _SIZE_SCALES[variable]
    value = record.indicator(variable.value)
    if use_abs:
        value = abs(value)
    return max(MIN_MARKER_SIZE, value * multiplier)


def cluster_color(record: CountryRecord) -> Union[int, float]:
    # trace pins cmin/cmax to the cluster domain, so the id maps straight onto the colorscale
    return record.cluster


def _fixed(value: float, digits: int) -> str:
    # połówki zaokrąglane od zera (jak toFixed w przeglądarce), na dokładnej wartości binarnej
    if not math.isfinite(value):
        return str(value)
    q = Decimal(value).quantize(Decimal(10) ** -digits, rounding=ROUND_HALF_UP)
    return format(q, "f")


def _pct(value: float, digits: int) -> str:
    return f"{_fixed(value * 100, digits)}%"


def hover_text(record: CountryRecord, compact: bool = False) -> str:
    lines = [
        record.name,
        f"Inflation: {_pct(record.inflation_rate, 1)}",
        f"Policy Rate: {_pct(record.policy_rate, 2)}",
        f"Unemployment: {_pct(record.unemployment_rate, 1)}",
        f"GDP Growth: {_pct(record.gdp_growth, 2)}",
    ]
    if not compact:
        lines.append(f"Producer Inflation: {_pct(record.producer_inflation, 2)}")
    lines.append(f"Cluster: {record.cluster}")
    if not compact:
        lines += [
            f"Real Effective Exchange Rate: {_fixed(record.real_effective_exchange_rate, 2)}",
            f"Equity Risk Premium: {_fixed(record.equity_risk_premium, 2)}",
            f"Gov Debt: {_fixed(record.gov_debt, 2)}",
            f"Political Risk: {_fixed(record.political_risk, 2)}",
        ]
    return "<br>".join(lines)


def build_geometry(
    records: Iterable[CountryRecord],
    selector: SizeSelector = None,
    compact_hover: bool = False,
) -> RenderGeometry:
    variable = resolve_size_variable(selector)
    rows = list(records)
    return RenderGeometry(
        x=tuple(r.PC1 for r in rows),
        y=tuple(r.PC2 for r in rows),
        z=tuple(r.PC3 for r in rows),
        sizes=tuple(marker_size(r, variable) for r in rows),
        colors=tuple(cluster_color(r) for r in rows),
        texts=tuple(hover_text(r, compact=compact_hover) for r in rows),
    )


def size_variable_label(selector: SizeSelector) -> str:
    return resolve_size_variable(selector).label
