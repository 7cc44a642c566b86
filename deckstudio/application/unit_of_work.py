"""
Unit of Work pattern implementation for transaction boundaries.

The Unit of Work keeps the repositories of one business transaction on a
single session and decides whether their changes are committed or rolled back.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from deckstudio.application.ports import (
    GeneratedImageRepositoryPort,
    PresentationQueriesPort,
    PresentationRepositoryPort,
    TemplateUploadRepositoryPort,
)


class UnitOfWork:
    """
    Unit of Work implementation that manages transaction boundaries
    and provides access to repositories within a transaction context.
    """

    def __init__(
        self,
        session: AsyncSession,
        presentation_repo: PresentationRepositoryPort = None,
        presentation_queries: PresentationQueriesPort = None,
        template_repo: TemplateUploadRepositoryPort = None,
        image_repo: GeneratedImageRepositoryPort = None,
    ):
        # Imported here so the application layer does not depend on the data
        # layer at import time.
        from deckstudio.data.queries.presentation_queries import PresentationQueries
        from deckstudio.data.repositories.generated_image_repository import (
            GeneratedImageRepository,
        )
        from deckstudio.data.repositories.presentation_repository import (
            PresentationRepository,
        )
        from deckstudio.data.repositories.template_upload_repository import (
            TemplateUploadRepository,
        )

        self.session = session
        self.presentation_repo = presentation_repo or PresentationRepository(session)
        self.presentation_queries = presentation_queries or PresentationQueries(
            session
        )
        self.template_repo = template_repo or TemplateUploadRepository(session)
        self.image_repo = image_repo or GeneratedImageRepository(session)
        self._committed = False

    async def __aenter__(self):
        """Enter transaction context."""
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit transaction context; anything not committed is rolled back."""
        if exc_type is not None or not self._committed:
            await self.rollback()

    async def commit(self):
        await self.session.commit()
        self._committed = True

    async def rollback(self):
        await self.session.rollback()

    @property
    def is_committed(self) -> bool:
        return self._committed
