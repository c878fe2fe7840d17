"""Address directory lookup endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ...persistence.base import AddressDirectory
from ...schemas.orders import AddressModel
from ..dependencies import get_directory

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("/{name}", response_model=AddressModel, status_code=status.HTTP_200_OK)
def resolve_address(name: str, directory: AddressDirectory = Depends(get_directory)) -> AddressModel:
    address = directory.resolve(name)
    if address is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Address '{name}' not found")
    return AddressModel.from_domain(address)
