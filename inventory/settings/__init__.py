"""
Django settings for the inventory project.

This package contains environment-specific settings:
- base.py: Common settings for all environments
- dev.py: Development environment settings
- prod.py: Production environment settings
- test.py: Test run settings (in-memory SQLite, fake media host)

Usage:
    Set DJANGO_SETTINGS_MODULE environment variable:
    - Development: inventory.settings.dev
    - Production: inventory.settings.prod
    - Tests: inventory.settings.test
"""

import os

# Default to development settings if not specified
environment = os.getenv('DJANGO_ENV', 'dev')

if environment == 'prod':
    from .prod import *
else:
    from .dev import *
