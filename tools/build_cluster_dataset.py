# tools/build_cluster_dataset.py
"""
Buduje plik data/data.json (tablica CountryRecord) z eksportu klasteryzacji
(CSV albo Excel), który przychodzi z notebooka PCA/KMeans.

Wejście:
    - plik .csv / .xlsx z kolumnami: country_code, name (albo negara),
      PC1, PC2, PC3, cluster + dziewięć wskaźników

Wyjście:
    - data/data.json
      [
        {"country_code": "IDN", "name": "Indonesia", "PC1": 0.41, ..., "cluster": 1, ...},
        ...
      ]

Uruchomienie:
    python -m tools.build_cluster_dataset export.xlsx data/data.json
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
import pycountry

from domain.models import FIELD_ALIASES, INDICATOR_FIELDS, CountryRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("country_code", "PC1", "PC2", "PC3", "cluster") + INDICATOR_FIELDS


def code_to_name(code: str) -> Optional[str]:
    """ISO3 (albo ISO2) -> nazwa kraju z pycountry; None gdy kod nieznany."""
    if not isinstance(code, str) or not code.strip():
        return None
    raw = code.strip().upper()
    country = pycountry.countries.get(alpha_3=raw) or pycountry.countries.get(alpha_2=raw)
    if country is None:
        return None
    return getattr(country, "common_name", None) or country.name


def read_export(path: Path) -> pd.DataFrame:
    if path.suffix.lower() in {".xlsx", ".xls"}:
        return pd.read_excel(path)
    return pd.read_csv(path)


def normalize_frame(df: pd.DataFrame) -> pd.DataFrame:
    df = df.rename(columns={k: v for k, v in FIELD_ALIASES.items() if k in df.columns})

    missing = set(REQUIRED_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(
            f"Missing columns in export: {sorted(missing)}. "
            f"Available columns: {list(df.columns)}"
        )

    df = df.copy()
    df["country_code"] = df["country_code"].astype(str).str.strip().str.upper()
    if "name" not in df.columns:
        df["name"] = None
    # brakujące nazwy uzupełniamy z kodu ISO
    fill = df["name"].isna() | (df["name"].astype(str).str.strip() == "")
    df.loc[fill, "name"] = df.loc[fill, "country_code"].map(lambda c: code_to_name(c) or c)

    return df[["country_code", "name", "PC1", "PC2", "PC3", "cluster", *INDICATOR_FIELDS]]


def frame_to_records(df: pd.DataFrame) -> List[Dict]:
    rows = df.to_dict(orient="records")
    # walidacja tym samym kodem, którym aplikacja czyta plik
    return [CountryRecord.from_dict(row, index=i).to_dict() for i, row in enumerate(rows)]


def build_dataset(input_path: Path, output_path: Path) -> List[Dict]:
    if not input_path.exists():
        raise FileNotFoundError(f"Input file {input_path} does not exist")

    logger.info("Reading clustering export: %s", input_path)
    records = frame_to_records(normalize_frame(read_export(input_path)))

    clusters = sorted({r["cluster"] for r in records})
    logger.info("Records: %d, clusters present: %s", len(records), clusters)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(records, f, indent=2, ensure_ascii=False)

    logger.info("Dataset written to: %s", output_path.resolve())
    return records


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build data.json from a clustering export (CSV/Excel).")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path, nargs="?", default=Path("data/data.json"))
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    build_dataset(args.input, args.output)


if __name__ == "__main__":
    main()
