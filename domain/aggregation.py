# domain/aggregation.py
from __future__ import annotations
from typing import Dict, Iterable, List

from domain.models import CLUSTER_IDS, ClusterSummary, CountryRecord


def aggregate_clusters(records: Iterable[CountryRecord]) -> Dict[int, ClusterSummary]:
    """
    Statystyki per klaster (tylko CLUSTER_IDS).
    Puste klastry nie pojawiają się w wyniku; rekordy spoza domeny są pomijane.
    """
    groups: Dict[int, List[CountryRecord]] = {c: [] for c in CLUSTER_IDS}
    for r in records:
        if r.cluster in groups:
            groups[r.cluster].append(r)

    out: Dict[int, ClusterSummary] = {}
    for cluster_id in CLUSTER_IDS:
        members = groups[cluster_id]
        if not members:
            continue
        n = len(members)
        out[cluster_id] = ClusterSummary(
            cluster=cluster_id,
            count=n,
            countries=tuple(m.name for m in members),
            avg_inflation_rate=sum(m.inflation_rate for m in members) / n,
            avg_policy_rate=sum(m.policy_rate for m in members) / n,
            avg_unemployment_rate=sum(m.unemployment_rate for m in members) / n,
            avg_gdp_growth=sum(m.gdp_growth for m in members) / n,
        )
    return out


def out_of_domain(records: Iterable[CountryRecord]) -> List[CountryRecord]:
    return [r for r in records if r.cluster not in CLUSTER_IDS]
