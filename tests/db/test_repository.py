"""Unit tests for src/db/repository.py"""

from sqlalchemy.orm import Session

from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository


def test_sql_repository_fulfils_protocol(db_session_repo: Session) -> None:
    assert isinstance(SQLGameRepository(db_session_repo), GameRepository)


def test_object_without_storage_methods_is_not_a_repository() -> None:
    class ReadOnly:
        def get_game(self, game_id):
            return None

    assert not isinstance(ReadOnly(), GameRepository)
