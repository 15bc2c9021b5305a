from typing import Optional


class UpstreamUnavailable(Exception):
    """The card API could not be reached or did not return a usable JSON body."""

    def __init__(self, message: str, query: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.query = query
        self.status_code = status_code
