# integration/dataset_loader.py
from __future__ import annotations
from pathlib import Path
from typing import Any, List, Optional, Tuple
import json
import logging

import requests

from core.config import Config
from domain.aggregation import out_of_domain
from domain.models import CountryRecord, MalformedRecord

logger = logging.getLogger(__name__)


class DataLoadFailure(RuntimeError):
    """Nie udało się pobrać/odczytać zbioru danych – całość odrzucona, brak danych częściowych."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load dataset from {source}: {reason}")
        self.source = source
        self.reason = reason


class DatasetLoader:
    """
    Jednorazowy odczyt tablicy CountryRecord z pliku JSON.
      - źródło: ścieżka lokalna albo URL http(s) (requests),
      - status != 2xx, błąd sieci, zły JSON, zły rekord -> DataLoadFailure,
      - rekordy z klastrem spoza domeny zostają (tylko ostrzeżenie w logu).
    """

    def __init__(
        self,
        source: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.source = source or Config.DATA_SOURCE
        self.s = session or requests.Session()
        self.timeout = timeout if timeout is not None else Config.DATA_FETCH_TIMEOUT

        # debug/diag
        self.last_request: Optional[Tuple[str, Optional[int]]] = None

    @property
    def is_remote(self) -> bool:
        return self.source.lower().startswith(("http://", "https://"))

    # ---------------- raw ----------------

    def _fetch_remote(self) -> Any:
        try:
            r = self.s.get(self.source, timeout=self.timeout)
        except requests.RequestException as exc:
            self.last_request = (self.source, None)
            raise DataLoadFailure(self.source, f"request failed: {exc}") from exc

        self.last_request = (self.source, r.status_code)
        if not r.ok:
            raise DataLoadFailure(self.source, f"HTTP {r.status_code}")
        try:
            return r.json()
        except ValueError as exc:
            raise DataLoadFailure(self.source, f"invalid JSON: {exc}") from exc

    def _read_local(self) -> Any:
        path = Path(self.source)
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as exc:
            raise DataLoadFailure(self.source, f"cannot read file: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise DataLoadFailure(self.source, f"invalid JSON: {exc}") from exc

    # ---------------- public ----------------

    def load(self) -> List[CountryRecord]:
        logger.info("Loading dataset from %s", self.source)
        payload = self._fetch_remote() if self.is_remote else self._read_local()

        if not isinstance(payload, list):
            raise DataLoadFailure(self.source, f"expected a JSON array, got {type(payload).__name__}")

        try:
            records = [CountryRecord.from_dict(row, index=i) for i, row in enumerate(payload)]
        except MalformedRecord as exc:
            raise DataLoadFailure(self.source, str(exc)) from exc

        stray = out_of_domain(records)
        if stray:
            logger.warning(
                "%d record(s) with cluster id outside the cluster domain, left out of statistics: %s",
                len(stray),
                ", ".join(f"{r.country_code}={r.cluster}" for r in stray),
            )

        logger.info("Loaded %d records from %s", len(records), self.source)
        return records
