"""Celery application configuration."""

import os
from typing import Any

from celery import Celery
from celery.signals import worker_process_init

from plantcare.database.connection import dispose_engine
from plantcare.observability.sentry import init_sentry
from plantcare.utils.logging import configure_logging

configure_logging()
init_sentry()

# Redis URL for broker and result backend
REDIS_URL = os.environ["REDIS_URL"]

celery_app = Celery(
    "plant_care",
    broker=REDIS_URL,
    backend=REDIS_URL,
    include=["plantcare.orchestration.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_default_queue="plant_care",
    task_default_routing_key="plant_care",
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    # Reminder checks run every few minutes, so results are short-lived
    result_expires=3600,
    worker_prefetch_multiplier=1,
    worker_concurrency=2,
    # Logging is owned by configure_logging
    worker_hijack_root_logger=False,
    worker_redirect_stdouts=False,
)


@worker_process_init.connect
def reset_database_pool(**kwargs: Any) -> None:
    """Give each forked worker process its own connection pool."""
    dispose_engine()
