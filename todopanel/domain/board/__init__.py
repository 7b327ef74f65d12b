"""Board domain - the persisted aggregate of tasks and team members."""

from todopanel.domain.board.models import Board

__all__ = ["Board"]
