"""Fireproof Website Routes: list and remove fireproofed domains."""

from fastapi import APIRouter, Depends, status

from fireproof_login.api.dependencies import get_fireproof_repository
from fireproof_login.core.domains import is_valid_domain, normalize_domain
from fireproof_login.core.errors import InvalidDomainError, ResourceNotFoundError
from fireproof_login.infrastructure.fireproof_repository import (
    SqlFireproofWebsiteRepository,
)
from fireproof_login.schemas.fireproof import FireproofWebsiteResponse

router = APIRouter(prefix="/api/v1/fireproof-websites", tags=["fireproof-websites"])


@router.get("", response_model=list[FireproofWebsiteResponse])
async def list_fireproof_websites(
    repository: SqlFireproofWebsiteRepository = Depends(get_fireproof_repository),
):
    websites = await repository.get_fireproof_websites()
    return [FireproofWebsiteResponse(domain=w.domain) for w in websites]


@router.delete("/{domain}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_fireproof_website(
    domain: str,
    repository: SqlFireproofWebsiteRepository = Depends(get_fireproof_repository),
):
    if not is_valid_domain(normalize_domain(domain)):
        raise InvalidDomainError(domain)
    if not await repository.remove_fireproof_website(domain):
        raise ResourceNotFoundError("Fireproof website", domain)
