import os
import secrets
import string
from dataclasses import dataclass

SECRET_ALPHABET = string.ascii_letters + string.digits
SECRET_LENGTH = 32
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def generate_secret(length: int = SECRET_LENGTH) -> str:
    return "".join(secrets.choice(SECRET_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class Settings:
    secret: str
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = "INFO"
    secret_generated: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Read configuration once from the environment.

        An unset or empty ``WEBHOOK_SECRET`` gets a random one, flagged with
        ``secret_generated`` so startup can show it to the operator.
        """
        secret = os.getenv("WEBHOOK_SECRET", "")
        generated = not secret
        if generated:
            secret = generate_secret()
        return cls(
            secret=secret,
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            host=os.getenv("HOST", DEFAULT_HOST),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            secret_generated=generated,
        )

    def __repr__(self) -> str:
        return f"Settings(port={self.port}, host={self.host!r}, log_level={self.log_level!r}, secret_generated={self.secret_generated})"
