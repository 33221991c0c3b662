"""
Upload checks for product images
"""
from django.conf import settings

from .exceptions import ImageValidationError


def validate_product_image(image):
    """
    Validate an uploaded product image.

    Only image/* content types up to settings.PRODUCT_IMAGE_MAX_SIZE bytes
    are accepted.

    Args:
        image: Django UploadedFile

    Raises:
        ImageValidationError: if the file is not an acceptable image
    """
    content_type = getattr(image, 'content_type', '') or ''
    if not content_type.startswith('image/'):
        raise ImageValidationError('Only image files are allowed!')

    max_size = settings.PRODUCT_IMAGE_MAX_SIZE
    if image.size > max_size:
        raise ImageValidationError(
            f'Image size should be less than {max_size // (1024 * 1024)}MB'
        )

    return image
