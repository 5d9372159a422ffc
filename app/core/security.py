"""Password hashing."""
from passlib.context import CryptContext

BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes; longer secrets are truncated, not rejected
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)
