"""Custom exception classes for the application."""

from typing import Any


class EzhikError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# External API Errors
class ExternalAPIError(EzhikError):
    """Error calling external API."""

    def __init__(self, api_name: str, message: str) -> None:
        self.api_name = api_name
        super().__init__(f"{api_name} API error: {message}", {"api": api_name})


class APIKeyMissingError(ExternalAPIError):
    """API key not configured."""

    def __init__(self, api_name: str) -> None:
        super().__init__(api_name, "API key not configured")


# Video download errors
class VideoDownloadError(EzhikError):
    """The external downloader failed or produced no file."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message, {"output": output} if output else None)
        self.output = output


# Asset storage errors
class AssetStorageError(EzhikError):
    """Base class for uploaded-asset storage errors."""

    pass


class AssetNotFoundError(AssetStorageError):
    """Requested asset does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Asset not found: {path}")


class InvalidAssetPathError(AssetStorageError):
    """Requested path escapes the storage root."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid asset path: {path}")


class AssetTooLargeError(AssetStorageError):
    """Uploaded payload exceeds the configured limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Asset of {size} bytes exceeds limit of {limit} bytes",
            {"size": size, "limit": limit},
        )
