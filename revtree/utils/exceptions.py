from typing import Any, Optional


class RevTreeException(Exception):
    """Base exception for revtree"""

    error_code = "REVTREE_ERROR"

    def __init__(self, detail: Any = None, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code or self.error_code

    def __str__(self) -> str:
        return f"{self.detail} ({self.error_code})" if self.detail else self.error_code


class LsTreeParseException(RevTreeException):
    """Raised for listing lines that do not follow the ls-tree format"""

    error_code = "INVALID_LISTING"

    def __init__(self, detail: str = "Invalid tree listing", line_number: Optional[int] = None):
        if line_number is not None:
            detail = f"line {line_number}: {detail}"
        super().__init__(detail)
        self.line_number = line_number


class InvalidConfigException(RevTreeException):
    error_code = "INVALID_CONFIG"

    def __init__(self, detail: str = "Invalid configuration"):
        super().__init__(detail)


class ResourceNotFoundException(RevTreeException):
    error_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(detail)


class ExportException(RevTreeException):
    error_code = "EXPORT_FAILED"

    def __init__(self, detail: str = "Export failed"):
        super().__init__(detail)
