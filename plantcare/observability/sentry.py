"""Sentry error reporting for the API and Celery workers."""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.celery import CeleryIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from plantcare import __version__

logger = logging.getLogger(__name__)

DEFAULT_TRACES_SAMPLE_RATE = 0.2


def _traces_sample_rate() -> float:
    raw = os.environ.get("SENTRY_TRACES_SAMPLE_RATE")
    if raw is None:
        return DEFAULT_TRACES_SAMPLE_RATE
    try:
        rate = float(raw)
    except ValueError:
        logger.warning(f"Invalid SENTRY_TRACES_SAMPLE_RATE={raw!r}, using default")
        return DEFAULT_TRACES_SAMPLE_RATE
    return min(max(rate, 0.0), 1.0)


def init_sentry() -> bool:
    """Initialise Sentry when SENTRY_DSN is configured.

    ERROR logs are sent as events and INFO logs are kept as breadcrumbs.
    FastAPI is instrumented automatically by the SDK.

    :returns: True if Sentry was initialised.
    """
    dsn = os.environ.get("SENTRY_DSN")
    if not dsn:
        logger.debug("SENTRY_DSN not set, error reporting disabled")
        return False

    sentry_sdk.init(
        dsn=dsn,
        integrations=[
            CeleryIntegration(monitor_beat_tasks=True),
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        environment=os.environ.get("APP_ENV", "local"),
        release=f"plant-care@{__version__}",
        send_default_pii=False,
        traces_sample_rate=_traces_sample_rate(),
    )
    return True
