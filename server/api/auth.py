# server/api/auth.py

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.accounts import AccountRegistry
from core.security import TokenService
from database import get_account_registry, get_token_service
from models.user import Account, Credentials, Message, Token


router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Resolves the bearer token to a username.
    No token raises TokenMissingError (401), a bad one TokenInvalidError (403).
    """
    token = credentials.credentials if credentials else None
    return tokens.verify(token)


@router.post("/register", response_model=Message, status_code=status.HTTP_201_CREATED)
def register(body: Credentials, accounts: AccountRegistry = Depends(get_account_registry)):
    accounts.register(body.username, body.password)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=Token)
def login(
    body: Credentials,
    accounts: AccountRegistry = Depends(get_account_registry),
    tokens: TokenService = Depends(get_token_service),
):
    username = accounts.authenticate(body.username, body.password)
    return {"token": tokens.issue(username)}


@router.get("/accounts", response_model=list[Account])
def list_accounts(
    current_user: str = Depends(get_current_user),
    accounts: AccountRegistry = Depends(get_account_registry),
):
    return [Account(username=u.username) for u in accounts.list_all()]
