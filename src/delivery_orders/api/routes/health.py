"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check database connection and order table status."""
    from ...db.supabase import get_supabase_client

    supabase = get_supabase_client()
    if not supabase:
        return {
            "configured": False,
            "message": "Supabase not configured. Set DLV_SUPABASE_URL and DLV_SUPABASE_KEY environment variables.",
        }

    try:
        supabase.table(settings.orders_table).select("id").limit(1).execute()
    except Exception as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }
    return {"configured": True, "connected": True, "message": "Database connected."}


@router.post("/health/sync-addresses", status_code=status.HTTP_200_OK)
def sync_addresses() -> dict:
    """Manually sync addresses from the configured workbook to the database."""
    from ...data.addresses_repository import load_addresses_from_file, sync_addresses_to_database

    try:
        file_addresses = load_addresses_from_file()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    inserted = sync_addresses_to_database(file_addresses)
    return {
        "status": "success",
        "file_addresses": len(file_addresses),
        "inserted": inserted,
        "message": f"Synced {inserted} new addresses to database"
        if settings.database_configured
        else "Database not configured",
    }
