"""
Dependency container injection module - Main Layer

Composition root: owns the single ScoringStage of the process and hands
it explicitly to every use case and adapter.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from scoring_stage.application.scoring_stage import ScoringStage
from scoring_stage.application.use_cases.scoring_use_cases import (
    GetHealthStatusUseCase,
    GetSpecificationUseCase,
    ScoreBatchUseCase,
    ScoreRecordUseCase,
)
from scoring_stage.infrastructure.loaders import load_specification
from scoring_stage.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    specification = providers.ThreadSafeSingleton(
        load_specification,
        source=config.scoring.specification_path,
    )

    # Application
    scoring_stage = providers.ThreadSafeSingleton(
        ScoringStage,
        specification=specification,
    )

    score_record_use_case = providers.Factory(
        ScoreRecordUseCase,
        stage=scoring_stage,
    )

    score_batch_use_case = providers.Factory(
        ScoreBatchUseCase,
        stage=scoring_stage,
        max_workers=config.scoring.batch_workers,
    )

    get_specification_use_case = providers.Factory(
        GetSpecificationUseCase,
        stage=scoring_stage,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        stage=scoring_stage,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Load the model specification before serving.

    A specification that cannot be loaded aborts startup; there is no
    degraded mode without a model.
    """
    container = get_container()

    stage = container.scoring_stage()
    spec = stage.specification
    logger.info(
        "container.stage.ready",
        model=spec.name,
        version=spec.version,
        kind=spec.kind.value,
    )

    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
