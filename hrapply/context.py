"""
Application context
Long-lived collaborators built once from settings and attached to the app
"""

from dataclasses import dataclass

from hrapply.core.config import Settings
from hrapply.database import Database
from hrapply.services.ai_processor import AIProcessor
from hrapply.services.pdf_renderer import FormRenderer


@dataclass
class AppContext:
    settings: Settings
    database: Database
    ai_processor: AIProcessor
    renderer: FormRenderer

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(
            settings=settings,
            database=Database(**settings.get_database_config()),
            ai_processor=AIProcessor.from_settings(settings),
            renderer=FormRenderer(fonts_dir=settings.fonts_dir, logo_path=settings.logo_path),
        )

    async def startup(self):
        await self.database.create_tables()

    async def shutdown(self):
        await self.database.dispose()
