"""
Model Scoring Stage

Loads one serialized regression model specification and scores input
records against it.

Layer Structure:
- Domain: Specification entities, errors and the pure evaluation logic
- Application: Scoring stage, use cases and DTOs
- Infrastructure: Specification loading, table adapter and Celery tasks
- Presentation: FastAPI controllers for the request adapter
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, entry points and configuration
"""
