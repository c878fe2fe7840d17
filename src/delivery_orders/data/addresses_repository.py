"""Address directory loader with database-first approach, falling back to a workbook."""

from __future__ import annotations

import functools
import logging
import math
from pathlib import Path
from typing import Iterable

from openpyxl import load_workbook

from ..config import settings
from ..db.supabase import get_supabase_client
from ..models.domain import Address, Coordinate
from ..persistence.base import AddressDirectory, OrderStore
from ..persistence.memory import InMemoryAddressDirectory, InMemoryOrderStore
from ..persistence.supabase_store import SupabaseAddressDirectory, SupabaseOrderStore

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"Name", "Latitude", "Longitude"}


def _normalize_address_name(name: str) -> str:
    return name.strip()


def load_addresses_from_file(source: Path | None = None) -> tuple[Address, ...]:
    """Load addresses from an Excel workbook with Name/Latitude/Longitude columns."""
    workbook_path = source or settings.addresses_file
    if workbook_path is None:
        raise ValueError("No address workbook configured (set DLV_ADDRESSES_FILE).")
    if not workbook_path.exists():
        raise FileNotFoundError(f"Address workbook not found: {workbook_path}")

    wb = load_workbook(workbook_path, data_only=True, read_only=True)
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Address workbook '{workbook_path}' is empty.")

        header_map = {name: idx for idx, name in enumerate(header)}
        missing_columns = REQUIRED_COLUMNS - set(header_map)
        if missing_columns:
            raise ValueError(f"Address workbook missing columns: {', '.join(sorted(missing_columns))}")

        addresses: list[Address] = []
        for row in rows:
            name_value = row[header_map["Name"]]
            if not name_value:
                continue
            try:
                latitude = float(row[header_map["Latitude"]])
                longitude = float(row[header_map["Longitude"]])
            except (TypeError, ValueError):
                logger.warning("Skipping address '%s' with unparseable coordinates", name_value)
                continue
            if not (math.isfinite(latitude) and math.isfinite(longitude)):
                logger.warning("Skipping address '%s' with non-finite coordinates", name_value)
                continue
            addresses.append(
                Address(
                    name=_normalize_address_name(str(name_value)),
                    location=Coordinate(latitude=latitude, longitude=longitude),
                )
            )
    finally:
        wb.close()
    return tuple(addresses)


def sync_addresses_to_database(addresses: Iterable[Address]) -> int:
    """Insert workbook addresses missing from the database. Returns the number inserted."""
    supabase = get_supabase_client()
    if not supabase:
        return 0

    existing_response = supabase.table(settings.addresses_table).select("name").execute()
    existing_names = {row["name"] for row in existing_response.data or []}

    new_addresses = [
        {
            "name": address.name,
            "latitude": address.location.latitude,
            "longitude": address.location.longitude,
        }
        for address in addresses
        if address.name not in existing_names
    ]
    if new_addresses:
        supabase.table(settings.addresses_table).insert(new_addresses).execute()
        logger.info("Synced %d address(es) to the database", len(new_addresses))
    return len(new_addresses)


@functools.lru_cache(maxsize=1)
def get_address_directory() -> AddressDirectory:
    """Database directory when Supabase is configured, otherwise the workbook (or nothing)."""
    supabase = get_supabase_client()
    if supabase:
        return SupabaseAddressDirectory(supabase)
    if settings.addresses_file is not None:
        return InMemoryAddressDirectory(load_addresses_from_file())
    logger.warning("No address source configured; every lookup will miss")
    return InMemoryAddressDirectory()


@functools.lru_cache(maxsize=1)
def get_order_store() -> OrderStore:
    supabase = get_supabase_client()
    if supabase:
        return SupabaseOrderStore(supabase)
    return InMemoryOrderStore()
