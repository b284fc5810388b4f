"""System-level endpoints such as the display locale toggle."""
from fastapi import APIRouter, Depends, HTTPException, status

from ...core.translations import available_languages
from ...schemas import LanguageRead, LanguageUpdate
from ...services.store import RecordStore
from ..dependencies import get_store

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/language", response_model=LanguageRead)
async def get_language(store: RecordStore = Depends(get_store)) -> LanguageRead:
    """Return the active display locale."""

    return LanguageRead(language=store.language, available=list(available_languages()))


@router.put("/language", response_model=LanguageRead)
async def update_language(
    payload: LanguageUpdate,
    store: RecordStore = Depends(get_store),
) -> LanguageRead:
    """Switch the display locale; unknown codes are rejected."""

    if not store.set_language(payload.language):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported language '{payload.language}'",
        )
    return LanguageRead(language=store.language, available=list(available_languages()))
