#!/usr/bin/env python3
"""
Worker Entry Point - Main Layer

Entry point of the message adapter. Loads the model specification before
the Celery worker starts consuming, so a bad specification stops the
worker instead of failing every message.
"""

import os

from scoring_stage.main.config import get_settings
from scoring_stage.main.container import init_container
from scoring_stage.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


def create_worker():
    """
    Configure and return the Celery worker.

    The stage is loaded here, in the parent process; forked worker
    processes inherit the loaded container.
    """
    settings = get_settings()

    os.environ.setdefault("CELERY_BROKER_URL", settings.celery.broker_url)
    os.environ.setdefault("CELERY_RESULT_BACKEND", settings.celery.result_backend_url)

    container = init_container(settings)
    stage = container.scoring_stage()

    from scoring_stage.infrastructure.services.celery_config import create_celery_app

    worker_app = create_celery_app(
        broker_url=settings.celery.broker_url,
        backend_url=settings.celery.result_backend_url,
        scoring_queue=settings.celery.scoring_queue,
    )

    logger.info(
        "Configuring Celery worker",
        broker_url=settings.celery.broker_url,
        queue=settings.celery.scoring_queue,
        model=stage.specification.name,
        model_version=stage.specification.version,
        app_name=worker_app.main,
    )

    return worker_app


def main():
    """Main entry point for Celery worker."""

    logger.info("Starting Celery worker")

    worker_app = create_worker()
    settings = get_settings()

    worker_app.worker_main(
        [
            "worker",
            "--loglevel=info",
            f"--queues={settings.celery.scoring_queue}",
            f"--concurrency={settings.celery.concurrency}",
        ]
    )


if __name__ == "__main__":
    main()
