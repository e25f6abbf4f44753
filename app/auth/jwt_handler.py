import logging
from datetime import datetime, timezone, timedelta

from fastapi import HTTPException, Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError

from app.config import config

logger = logging.getLogger(__name__)

# Tokens are issued by an external identity provider
oauth2_scheme_access = OAuth2PasswordBearer(tokenUrl="auth/token")


def verify_jwt_token(token: str = Depends(oauth2_scheme_access)) -> dict:
    """
    Verify JWT access token for correctness and expiration time.
    Returns the raw claim set; picking the subject out of it is left to the caller.
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])

        exp = payload.get("exp")
        if exp is None:
            raise HTTPException(status_code=401, detail="Missing 'exp' field in token")

        current_time = datetime.now(tz=timezone.utc)
        token_exp_time = datetime.fromtimestamp(exp, tz=timezone.utc)
        if token_exp_time < current_time:
            raise HTTPException(status_code=401, detail="Token has expired")

        logger.debug(f"Token payload: {payload}")
        return payload

    except JWTError as e:
        logger.error(f"JWT verification error: {str(e)}")
        raise HTTPException(status_code=401, detail="Token is invalid or expired")


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    """
    Create a new JWT access token.
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=config.JWT_ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)
    return encoded_jwt
