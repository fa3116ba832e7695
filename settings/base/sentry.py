import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

from .base import ENVIRONMENT, SENTRY_DSN

if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration()],
        environment=ENVIRONMENT,
        send_default_pii=False,
    )
