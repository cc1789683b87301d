from dependency_injector import containers, providers

from flashstudy.application.learning.use_cases.bootstrap_use_case import BootstrapUseCase
from flashstudy.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from flashstudy.application.learning.use_cases.set_use_case import SetUseCase
from flashstudy.domain.learning.services.set_derivation_service import SetDerivationService
from flashstudy.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from flashstudy.infrastructure.storage.id_generator import CounterIdGenerator
from flashstudy.infrastructure.storage.key_value_store import TieredKeyValueStore


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare store as a dependency that will be provided at runtime
    store = providers.Dependency(instance_of=TieredKeyValueStore)

    # Storage services
    id_generator = providers.Factory(CounterIdGenerator, store=store)

    # Repositories
    flashcard_repository = providers.Factory(
        FlashcardRepository,
        store=store,
        id_generator=id_generator,
    )

    # Domain services (pure domain logic, no storage)
    set_derivation_service = providers.Factory(SetDerivationService)

    # Learning module use cases
    flashcard_use_case = providers.Factory(
        FlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )

    set_use_case = providers.Factory(
        SetUseCase,
        flashcard_repository=flashcard_repository,
        set_derivation_service=set_derivation_service,
    )

    bootstrap_use_case = providers.Factory(
        BootstrapUseCase,
        flashcard_repository=flashcard_repository,
        id_generator=id_generator,
    )


# Initialize container
container = Container()
