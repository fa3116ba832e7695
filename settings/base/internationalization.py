"""Internationalization settings.
https://docs.djangoproject.com/en/5.1/topics/i18n/
"""

import os

from .base import BASE_DIR

LANGUAGE_CODE = "en"
TIME_ZONE = "Asia/Dhaka"
USE_I18N = True
USE_TZ = True


LOCALE_PATHS = [
    os.path.join(BASE_DIR, "locale"),  # add locale path for non-specific app
]

LANGUAGES = [("en", "English"), ("bn", "Bengali")]
