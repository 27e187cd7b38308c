"""Domain errors raised by the service layer.

Each carries the HTTP status the API answers with; ``main.py`` turns them
into ``{"detail": message}`` responses.
"""


class AdminError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(AdminError):
    status_code = 404


class DuplicateName(AdminError):
    status_code = 400


class InvalidStateTransition(AdminError):
    status_code = 400


class MissingProvenanceToken(AdminError):
    status_code = 400


class ConcurrentModification(AdminError):
    status_code = 409


class InvalidContent(AdminError):
    status_code = 400


class AssetError(AdminError):
    status_code = 400


class AuthenticationError(AdminError):
    status_code = 401


class MailDeliveryError(AdminError):
    status_code = 500
