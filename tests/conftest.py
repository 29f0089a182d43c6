"""
Shared fixtures and builders for Equify tests.
"""

import itertools
from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from equify.events import ChangeNotifier
from equify.health_score.models import FavorDirection, FavorRecord, Relationship

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
LONG_AGO = NOW - timedelta(days=30)

_favor_ids = itertools.count(1)


def make_relationship(rel_id: str, importance: int = 3, name: str = None) -> Relationship:
    return Relationship(id=rel_id, name=name or rel_id.title(), importance_level=importance)


def make_favors(
    rel_id: str, given: int = 0, received: int = 0, when: datetime = LONG_AGO
) -> List[FavorRecord]:
    favors = []
    for direction, count in ((FavorDirection.GIVEN, given), (FavorDirection.RECEIVED, received)):
        for _ in range(count):
            favors.append(
                FavorRecord(
                    id=f"fav-{next(_favor_ids)}",
                    relationship_id=rel_id,
                    direction=direction,
                    date_occurred=when,
                )
            )
    return favors


def favor_dict(rel_id: str, direction: str, when: datetime) -> dict:
    return {
        "id": f"fav-{next(_favor_ids)}",
        "relationship_id": rel_id,
        "direction": direction,
        "date_occurred": when.isoformat(),
    }


@pytest.fixture
def notifier():
    return ChangeNotifier()
