class PollutionClientError(Exception):
    """Base class for errors raised by the pollution client."""


class InvalidKeyError(PollutionClientError):
    def __init__(self, message: str = "invalid or missing API key"):
        super().__init__(message)


class InvalidOptionError(PollutionClientError):
    def __init__(self, message: str = "invalid option"):
        super().__init__(message)


class InvalidHttpClientError(PollutionClientError):
    def __init__(self, message: str = "invalid http client"):
        super().__init__(message)
