from typing import Optional


class BoardError(Exception):
    """Base error carrying the HTTP status and the message shown to the caller."""

    status_code = 500
    default_message = "An internal server error occurred."

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {'error': self.message}


class InvalidFormat(BoardError):
    status_code = 400
    default_message = "Invalid format. Please enter Riot ID (e.g., gameName#tagLine)"


class InvalidVote(BoardError):
    status_code = 400
    default_message = "A vote needs a stableId and an integer delta"


class NotFound(BoardError):
    status_code = 404
    default_message = "Summoner not found"


class ConfigurationError(BoardError):
    status_code = 500
    default_message = "Server configuration error: API key missing."


class StoreUnavailable(BoardError):
    status_code = 503
    default_message = "Server configuration error: database unavailable."


class ProviderError(BoardError):
    """Raised when a Riot API call does not produce a usable response."""

    def __init__(self, message: str = None, status_code: int = None, detail: Optional[str] = None):
        super().__init__(message, status_code)
        self.detail = detail


class ProviderBadRequest(ProviderError, InvalidFormat):
    default_message = "Bad Request - Check the format of the Riot ID."


class Forbidden(ProviderError):
    status_code = 403
    default_message = (
        "Forbidden - Check Riot API Key (valid, not expired, correct permissions) "
        "and ensure it matches the region/platform being queried."
    )


class ProfileNotFound(ProviderError, NotFound):
    default_message = (
        "Riot ID or associated Summoner data not found. "
        "Check spelling, tagLine, and region."
    )


class RateLimited(ProviderError):
    status_code = 429
    default_message = "Rate limit exceeded. Please wait before trying again."


class UpstreamError(ProviderError):
    status_code = 502
    default_message = "The Riot API returned an unexpected response."


def provider_error(status: int, detail: str = None) -> ProviderError:
    """Map a non-success Riot API status onto the matching error."""
    if status == 400:
        return ProviderBadRequest(detail=detail)
    if status in (401, 403):
        return Forbidden(status_code=403, detail=detail)
    if status == 404:
        return ProfileNotFound(detail=detail)
    if status == 429:
        return RateLimited(detail=detail)
    message = detail or f"Riot API Error: {status}"
    code = status if 400 <= status < 600 else 500
    return UpstreamError(message, status_code=code, detail=detail)
