"""
Application storage service
Inserts submitted records and reads them back
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hrapply.core.exceptions import ApplicationNotFoundError
from hrapply.models.database import Application
from hrapply.models.record import coerce_integer_fields

logger = structlog.get_logger()


class ApplicationStore:
    """Thin repository over the applications table"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: Dict[str, Any], created_at: Optional[datetime] = None) -> int:
        """
        Store a new application with status 'pending'

        Args:
            record: Full or partial Application Record as received
            created_at: Override for the creation time

        Returns:
            int: Generated application id
        """
        application = Application.from_record(coerce_integer_fields(record), created_at=created_at)

        self.session.add(application)
        await self.session.commit()
        await self.session.refresh(application)

        logger.info("Application stored", application_id=application.id, fields=len(record))
        return application.id

    async def list(self) -> List[Dict[str, Any]]:
        """All applications, newest first"""
        result = await self.session.execute(
            select(Application).order_by(Application.created_at.desc(), Application.id.desc())
        )
        applications = result.scalars().all()
        return [application.to_dict() for application in applications]

    async def get(self, application_id: Any) -> Dict[str, Any]:
        """
        Fetch exactly one application

        Raises:
            ApplicationNotFoundError: If no row matches the id
        """
        try:
            key = int(application_id)
        except (TypeError, ValueError):
            raise ApplicationNotFoundError(application_id)

        result = await self.session.execute(
            select(Application).where(Application.id == key)
        )
        application = result.scalar_one_or_none()

        if application is None:
            raise ApplicationNotFoundError(application_id)

        return application.to_dict()
