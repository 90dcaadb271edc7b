"""
Docker API Exceptions
"""

from typing import Optional


class DockerException(Exception):
    """Base Docker exception"""
    pass


class SerializationError(DockerException):
    """Options could not be converted to their wire form"""

    def __init__(self, message, source: Optional[BaseException] = None):
        super().__init__(message)
        self.source = source


class TransportError(DockerException):
    """Request could not be delivered to the Docker daemon"""
    pass


class APIError(TransportError):
    """Docker API error (non-success HTTP status)"""

    def __init__(self, message, response=None, status_code=None, explanation=None):
        super().__init__(message)
        self.response = response
        self.status_code = status_code
        self.explanation = explanation

    def is_client_error(self) -> bool:
        return self.status_code is not None and 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        return self.status_code is not None and 500 <= self.status_code < 600


class NetworkNotFound(APIError):
    """Network not found"""
    pass


class DeserializationError(DockerException):
    """Daemon response could not be parsed into the expected shape"""

    def __init__(self, message, body: Optional[bytes] = None, source: Optional[BaseException] = None):
        super().__init__(message)
        self.body = body
        self.source = source
