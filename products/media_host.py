"""
Media host client for product images.

Images are pushed to Cloudinary's signed REST API and addressed afterwards by
a public id derived from the stored secure URL. Views never talk to the host
directly: they obtain a backend through get_media_host() so tests can swap in
an in-memory implementation via settings.MEDIA_HOST['BACKEND'].
"""
import base64
import hashlib
import logging
import time
from typing import Dict, NamedTuple, Optional
from urllib.parse import urlsplit

import requests
from django.conf import settings
from django.utils.module_loading import import_string

from .exceptions import MediaHostError

logger = logging.getLogger(__name__)

CLOUDINARY_API_URL = 'https://api.cloudinary.com/v1_1'

# Parameters Cloudinary excludes from the signature string
UNSIGNED_PARAMS = {'file', 'api_key', 'cloud_name', 'resource_type', 'signature'}


class MediaUpload(NamedTuple):
    url: str
    public_id: str


def encode_data_uri(content: bytes, content_type: str) -> str:
    """Encode raw image bytes as a base64 data URI."""
    encoded = base64.b64encode(content).decode('ascii')
    return f"data:{content_type};base64,{encoded}"


def public_id_from_url(url: Optional[str], folder: str = 'products') -> Optional[str]:
    """
    Derive the storage key of an uploaded image from its URL.

    The key is the last path segment with its file extension stripped,
    prefixed with the upload folder:

        https://res.cloudinary.com/demo/image/upload/v1/products/abc123.jpg
        -> products/abc123

    Returns None when no key can be derived.
    """
    if not url:
        return None

    last_segment = urlsplit(url).path.rstrip('/').split('/')[-1]
    key = last_segment.split('.')[0]
    if not key:
        return None

    return f"{folder}/{key}" if folder else key


class MediaHost:
    """
    Interface for an external image store.

    upload(content, content_type) -> MediaUpload
    destroy(public_id) -> bool (False when the host reports the object missing)

    Both raise MediaHostError on failure.
    """

    def __init__(self, folder='products', **options):
        self.folder = folder

    def upload(self, content: bytes, content_type: str) -> MediaUpload:
        raise NotImplementedError

    def destroy(self, public_id: str) -> bool:
        raise NotImplementedError

    def public_id_for(self, url: Optional[str]) -> Optional[str]:
        return public_id_from_url(url, self.folder)


class CloudinaryMediaHost(MediaHost):
    """
    Cloudinary backend using the signed upload and destroy endpoints.
    """

    def __init__(self, cloud_name='', api_key='', api_secret='', folder='products', timeout=30, **options):
        super().__init__(folder=folder)
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout

    def sign(self, params: Dict[str, object]) -> str:
        """
        Compute the request signature.

        Signed parameters are sorted by name, joined as key=value pairs with
        '&', suffixed with the API secret and hashed with SHA-1.
        """
        to_sign = '&'.join(
            f"{key}={value}"
            for key, value in sorted(params.items())
            if key not in UNSIGNED_PARAMS and value not in (None, '')
        )
        return hashlib.sha1(f"{to_sign}{self.api_secret}".encode('utf-8')).hexdigest()

    def _post(self, endpoint: str, params: Dict[str, object]) -> dict:
        if not (self.cloud_name and self.api_key and self.api_secret):
            raise MediaHostError("Cloudinary credentials are not configured")

        payload = dict(params)
        payload['timestamp'] = int(time.time())
        payload['signature'] = self.sign(payload)
        payload['api_key'] = self.api_key

        url = f"{CLOUDINARY_API_URL}/{self.cloud_name}/{endpoint}"

        try:
            response = requests.post(url, data=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise MediaHostError(f"Request to media host failed: {str(e)}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise MediaHostError(
                f"Media host returned a non-JSON response (HTTP {response.status_code})"
            ) from e

        if response.status_code >= 400 or 'error' in body:
            error = body.get('error') or {}
            message = error.get('message') if isinstance(error, dict) else str(error)
            raise MediaHostError(
                f"Media host rejected {endpoint} (HTTP {response.status_code}): {message or 'unknown error'}"
            )

        return body

    def upload(self, content: bytes, content_type: str) -> MediaUpload:
        body = self._post('auto/upload', {
            'file': encode_data_uri(content, content_type),
            'folder': self.folder,
        })

        secure_url = body.get('secure_url')
        if not secure_url:
            raise MediaHostError("Media host response did not include a secure_url")

        logger.info(f"Uploaded image {body.get('public_id')} ({len(content)} bytes)")
        return MediaUpload(url=secure_url, public_id=body.get('public_id', ''))

    def destroy(self, public_id: str) -> bool:
        body = self._post('image/destroy', {'public_id': public_id})
        result = body.get('result')

        if result == 'ok':
            logger.info(f"Destroyed image {public_id}")
            return True
        if result == 'not found':
            logger.info(f"Image {public_id} was already gone from the media host")
            return False

        raise MediaHostError(f"Unexpected destroy result for {public_id}: {result}")


def get_media_host() -> MediaHost:
    """Instantiate the backend configured in settings.MEDIA_HOST."""
    config = dict(settings.MEDIA_HOST)
    backend_class = import_string(config.pop('BACKEND'))
    return backend_class(**{key.lower(): value for key, value in config.items()})
