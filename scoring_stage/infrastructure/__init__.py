"""
Infrastructure Layer Package

Specification loading and the adapters that connect the scoring stage
to tables, message brokers and Celery workers.
"""
