class ResumeAnalysisError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 500
    message = "An unexpected error occurred."

    def __init__(self, message: str = None, status_code: int = None, detail: str = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        # Internal cause, logged but never sent to the client.
        self.detail = detail or self.message
        super().__init__(self.detail)


class ExtractionError(ResumeAnalysisError):
    status_code = 422
    message = "Failed to process file"


class ValidationError(ResumeAnalysisError):
    status_code = 400
    message = "Invalid request"


class PayloadTooLargeError(ValidationError):
    status_code = 413
    message = "Uploaded file is too large"


class MalformedModelResponseError(ResumeAnalysisError):
    status_code = 502
    message = "Failed to analyze resume. Please try again."


class UpstreamServiceError(ResumeAnalysisError):
    status_code = 502
    message = "Failed to analyze resume. Please try again."
