import hmac

NO_SECRET_MESSAGE = "No secret provided."
WRONG_SECRET_MESSAGE = "Wrong secret."


class SecretError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def secrets_match(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
