import bcrypt

from ebookstore.errors import WrongPassword

BCRYPT_COST = 12

# bcrypt only looks at the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72


class BcryptHasher:
    """Adaptive one-way password hashing (bcrypt, 60-char output)."""

    def __init__(self, cost: int = BCRYPT_COST):
        self.cost = cost

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.cost)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, hashed: str, password: str) -> None:
        """Raise WrongPassword when the password does not match the hash."""
        encoded = password.encode("utf-8")
        # nothing that long can ever have been hashed
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise WrongPassword("the hashed password does not match the provided one")

        if not bcrypt.checkpw(encoded, hashed.encode("utf-8")):
            raise WrongPassword("the hashed password does not match the provided one")
