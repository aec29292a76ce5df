from fastapi import APIRouter, Depends

from api.dependencies import get_sign_in_provider, get_token_provider
from carriage.auth import AuthProvider, CarriageTokenProvider
from carriage.db import Store, get_store
from carriage.services.auth import SignInRequest, sign_in

router = APIRouter(prefix="/api/auth")


@router.post("")
async def authenticate(
    body: SignInRequest,
    store: Store = Depends(get_store),
    identity_provider: AuthProvider = Depends(get_sign_in_provider),
    token_provider: CarriageTokenProvider = Depends(get_token_provider),
) -> dict:
    """
    Verify an identity-provider session token and issue a Carriage bearer token
    for the matching Admin, Driver or Rider account.
    """
    response = await sign_in(store, identity_provider, token_provider, body)
    return {"data": response.model_dump(mode="json", by_alias=True)}
