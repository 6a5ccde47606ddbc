"""Custom exception hierarchy for the service layer"""

class ServiceError(Exception):
    """Base exception for all service-related errors"""
    http_status = 500

    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for JSON response"""
        return {
            "code": self.error_code,
            "message": self.message
        }


class ValidationError(ServiceError):
    """Raised when input validation fails"""
    http_status = 400

    def __init__(self, message: str = "Invalid input provided", error_code: str = "VALIDATION_ERROR"):
        super().__init__(message, error_code)


class InvalidAddressError(ValidationError):
    """Raised when the requested address is not a well-formed, allowed absolute URL"""
    def __init__(self, message: str = "Invalid or unsafe URL provided"):
        super().__init__(message, "INVALID_ADDRESS")


class FetchError(ServiceError):
    """Raised when fetching content from URL fails"""
    http_status = 502

    def __init__(self, message: str = "Failed to fetch content from URL", error_code: str = "FETCH_ERROR"):
        super().__init__(message, error_code)


class NonSuccessStatusError(FetchError):
    """Raised when the server answers with a status outside [200, 300)"""
    def __init__(self, status_code: int, fetch_result=None, message: str = None):
        if message is None:
            message = f"HTTP request failed with status code {status_code}"
        super().__init__(message, "NON_SUCCESS_STATUS")
        self.status_code = status_code
        self.fetch_result = fetch_result

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["details"] = {"status_code": self.status_code}
        return result


class TransportError(FetchError):
    """Raised on network-level failures (DNS, refused connection, TLS, protocol)"""
    def __init__(self, message: str = "Network error while fetching URL", error_code: str = "TRANSPORT_FAILURE"):
        super().__init__(message, error_code)


class TransportTimeoutError(TransportError):
    """Raised when the transport gives up waiting for the server"""
    http_status = 504

    def __init__(self, message: str = "Timed out while fetching URL"):
        super().__init__(message, "TRANSPORT_TIMEOUT")


class ExtractionFailedError(ServiceError):
    """Raised when no document could be loaded and there is no response to fall back on"""
    http_status = 422

    def __init__(self, message: str = "Could not extract metadata from URL"):
        super().__init__(message, "EXTRACTION_FAILED")
