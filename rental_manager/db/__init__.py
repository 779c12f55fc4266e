from rental_manager.db.base import (
    Base,
    create_db_engine,
    create_session_factory,
    run_migrations,
)

__all__ = ["Base", "create_db_engine", "create_session_factory", "run_migrations"]
