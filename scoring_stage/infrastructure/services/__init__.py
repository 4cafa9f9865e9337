"""Infrastructure services: Celery application and tasks."""
