"""
Settings used by the test suite.
"""

from .base import *

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

MEDIA_HOST = {
    **MEDIA_HOST,
    'BACKEND': 'products.tests.fakes.FakeMediaHost',
    'CLOUD_NAME': 'test-cloud',
    'API_KEY': 'test-key',
    'API_SECRET': 'test-secret',
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'CRITICAL',
    },
}
