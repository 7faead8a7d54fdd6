"""Password hashing."""
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash with bcrypt; ``rounds`` overrides the context's default cost factor."""
    if rounds is None:
        return pwd_context.hash(password)
    return pwd_context.handler("bcrypt").using(rounds=rounds).hash(password)
