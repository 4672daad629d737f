import secrets
import string
import uuid

PASSWORD_LENGTH = 8
PASSWORD_ALPHABET = string.ascii_letters + string.digits


class UUIDGenerator:
    def new_id(self) -> str:
        return str(uuid.uuid4())


class PasswordGenerator:
    def new_password(self) -> str:
        return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(PASSWORD_LENGTH))
