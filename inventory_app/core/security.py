from passlib.context import CryptContext

# cost 10 matches the hashes written by earlier deployments of the tracker
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def dummy_verify() -> None:
    """Burn the same time as a real verify, for unknown usernames."""
    pwd_context.dummy_verify()
