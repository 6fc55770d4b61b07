"""
config.py

Purpose:
    Read Flavor Pairer settings from environment variables (optionally via a
    .env file), create a Supabase client when the catalog lives there, and
    load the configured catalog.

Usage:
    from src.flavor_pairer.config import get_settings, load_catalog
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from supabase import create_client, Client

from dotenv import find_dotenv, load_dotenv      # Load environment variables from .env file

from src.flavor_pairer.catalog.catalog import IngredientCatalog
from src.flavor_pairer.logging_utils import get_logger

load_dotenv(find_dotenv(usecwd=True))  # loads .env from the working directory upward

logger = get_logger("config")

DEFAULT_CATALOG_CSV = "data/flavor_pairings.csv"
CATALOG_SOURCES = ("csv", "supabase")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    catalog_source: str = "csv"
    catalog_csv: str = DEFAULT_CATALOG_CSV
    symmetric: bool = True
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build Settings from FLAVOR_PAIRER_* environment variables."""
    source = os.environ.get("FLAVOR_PAIRER_CATALOG_SOURCE", "csv").strip().lower()
    if source not in CATALOG_SOURCES:
        raise ValueError(f"FLAVOR_PAIRER_CATALOG_SOURCE must be one of {CATALOG_SOURCES}, got {source!r}")
    return Settings(
        catalog_source=source,
        catalog_csv=os.environ.get("FLAVOR_PAIRER_CATALOG_CSV", DEFAULT_CATALOG_CSV),
        symmetric=_env_bool("FLAVOR_PAIRER_SYMMETRIC", True),
        log_level=os.environ.get("FLAVOR_PAIRER_LOG_LEVEL", "INFO").upper(),
    )


def get_supabase_client() -> Client:
    """Create a Supabase client using env vars."""
    url = os.environ["SUPABASE_URL"]
    key = os.environ["SUPABASE_SERVICE_ROLE_KEY"]
    return create_client(url, key)


def load_catalog(settings: Optional[Settings] = None) -> IngredientCatalog:
    """Load the ingredient catalog from the configured source."""
    settings = settings or get_settings()
    logger.info(
        "Loading catalog from %s",
        settings.catalog_source,
        extra={"invoking_func": "load_catalog", "next_step": "Construct ingredient tree"},
    )
    if settings.catalog_source == "supabase":
        return IngredientCatalog.from_supabase(get_supabase_client(), symmetric=settings.symmetric)
    return IngredientCatalog.from_csv(settings.catalog_csv, symmetric=settings.symmetric)
