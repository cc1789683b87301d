"""FastAPI dependencies for the application."""

import logging
from typing import Annotated

from fastapi import Depends, Request

from flashstudy.application.learning.use_cases.bootstrap_use_case import BootstrapUseCase
from flashstudy.config import Settings
from flashstudy.core import container
from flashstudy.infrastructure.common.di import inject_use_case

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


async def ensure_sample_data(
    settings: AppSettings,
    use_case: BootstrapUseCase = Depends(inject_use_case(container.bootstrap_use_case)),
) -> None:
    """
    Seed sample flashcards when the collection is empty.

    Runs before every API route. A failure here is logged and does not fail
    the request, the route itself reports storage problems.

    Usage:
        router = APIRouter(dependencies=[Depends(ensure_sample_data)])
    """
    if not settings.SEED_SAMPLE_DATA:
        return
    try:
        await use_case.ensure_sample_data()
    except Exception as e:  # noqa: BLE001
        logger.error(f"Failed to initialize sample data: {e!s}", exc_info=True)
