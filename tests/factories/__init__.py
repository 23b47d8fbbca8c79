"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, TeamFactory, ...
"""

from tests.factories.base import BaseFactory, short_id, utc_now
from tests.factories.project import ProjectFactory, TaskFactory
from tests.factories.team import TeamFactory, TeamMemberFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "short_id",
    "utc_now",
    # User
    "DEFAULT_TEST_PASSWORD",
    "UserFactory",
    # Team
    "TeamFactory",
    "TeamMemberFactory",
    # Work items
    "ProjectFactory",
    "TaskFactory",
]
