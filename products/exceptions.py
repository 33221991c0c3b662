"""
Exception classes for the product write path.
"""


class ProductError(Exception):
    """Base exception for product-management errors"""
    pass


class MediaHostError(ProductError):
    """
    Raised when the media host cannot complete an upload or destroy.

    Common causes:
    - Network failure or timeout
    - Invalid credentials or signature
    - Non-JSON or error response from the host
    """
    pass


class ImageValidationError(ProductError):
    """
    Raised when an uploaded file is not acceptable as a product image.

    This occurs when:
    - The content type is not image/*
    - The file exceeds the configured size limit
    """
    pass
