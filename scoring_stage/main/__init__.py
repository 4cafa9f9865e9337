"""
Main Layer Package

Composition root and process entry points: the HTTP app, the Celery
worker and the batch job.
"""
