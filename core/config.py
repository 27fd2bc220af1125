# core/config.py
import os

from dotenv import load_dotenv

# .env (dev-friendly) wczytany zanim Config odczyta os.environ; .env.local uzupełnia tylko brakujące wartości
load_dotenv()
load_dotenv(dotenv_path=".env.local", override=False)


class Config:
    # Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Dane wejściowe – plik JSON z wynikiem klasteryzacji (ścieżka lokalna albo URL http/https)
    DATA_SOURCE = os.environ.get("DATA_SOURCE", "data/data.json")
    DATA_FETCH_TIMEOUT = float(os.environ.get("DATA_FETCH_TIMEOUT", "30"))

    # Wykres
    DEFAULT_SIZE_VARIABLE = os.environ.get("DEFAULT_SIZE_VARIABLE", "inflation_rate")
    PLOT_WIDTH = int(os.environ.get("PLOT_WIDTH", "800"))
    PLOT_HEIGHT = int(os.environ.get("PLOT_HEIGHT", "600"))
    PLOT_DISPLAY_MODE_BAR = bool(int(os.environ.get("PLOT_DISPLAY_MODE_BAR", "1")))

    PAGE_TITLE = os.environ.get("PAGE_TITLE", "3D Cluster Visualization Dashboard")
