# fakeso/core/db.py
"""
Database configuration and initialization module.
Handles Tortoise ORM setup, database connection, and migration configuration.
"""
from tortoise import Tortoise

from fakeso.config import settings

DB_URL = settings.database_url

# Tortoise ORM configuration dictionary
# This configuration is also used by Aerich for database migrations
TORTOISE_ORM = {
    "connections": {"default": DB_URL},
    "apps": {
        "models": {
            "models": [
                "fakeso.models.user",       # User model
                "fakeso.models.message",    # Message model
                "fakeso.models.tag",        # Tag model
                "fakeso.models.comment",    # Comment model
                "fakeso.models.answer",     # Answer model
                "fakeso.models.question",   # Question model
                "aerich.models",            # Required: Let Aerich manage migration tables
            ],
            "default_connection": "default",
        },
    },
    # Datetimes are stored as UTC so ordering in the store is chronological
    "use_tz": True,
    "timezone": "UTC",
}

async def init_db():
    """
    Initialize Tortoise ORM database connection.

    Called during application startup to establish the database connection
    and register all models. Schemas are managed with Aerich migrations.
    """
    await Tortoise.init(config=TORTOISE_ORM)

async def close_db():
    """
    Close all database connections.
    Called during application shutdown.
    """
    await Tortoise.close_connections()
