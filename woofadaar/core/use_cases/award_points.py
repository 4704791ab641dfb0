"""
Award Points Use Case - award points for a user action.

Combines the repositories with the domain rules: the domain decides how many
points, this use-case guarantees they are recorded at most once per
(user, source, source_id).
"""

import logging
from dataclasses import dataclass
from datetime import date

from tortoise.exceptions import IntegrityError

from woofadaar.config import config
from woofadaar.core.domain.catalog import GamificationCatalog, get_catalog
from woofadaar.core.domain.errors import InvalidActionError
from woofadaar.core.domain.points import (
    award_points,
    base_points,
    derive_context_flags,
    describe_award,
)
from woofadaar.core.domain.regional import detect_festival
from woofadaar.database.models import User
from woofadaar.storage import points_repo

logger = logging.getLogger(__name__)


@dataclass
class AwardPointsResult:
    """Outcome of an award attempt."""

    success: bool
    points_awarded: int = 0
    multiplier: float = 1.0
    new_level: int = 1
    leveled_up: bool = False
    points_to_next_level: int = 0
    total_lifetime_points: int = 0
    transaction_id: int | None = None
    duplicate: bool = False
    error_message: str = ""


class AwardPointsUseCase:
    """Use-case for awarding points."""

    def __init__(
        self,
        catalog: GamificationCatalog | None = None,
        new_user_window_days: int | None = None,
    ):
        self.catalog = catalog or get_catalog()
        self.new_user_window_days = (
            new_user_window_days
            if new_user_window_days is not None
            else config.NEW_USER_WINDOW_DAYS
        )

    async def execute(
        self,
        user: User,
        action: str,
        source: str | None = None,
        source_id: str | int | None = None,
        festival: str | None = None,
        dog_breed: str | None = None,
        is_festival_period: bool = False,
        today: date | None = None,
    ) -> AwardPointsResult:
        """
        Award points for an action.

        Args:
            user: User earning the points
            action: action id from the catalog (e.g. "bestAnswer")
            source: what earned the points (defaults to the action id)
            source_id: id of the source object; awards are deduplicated on it
            festival: festival name for the regional bonus, detected from
                today's date if omitted
            dog_breed: breed of the dog involved, for the native-breed bonus
            is_festival_period: platform-wide festival event is running
            today: date (for tests, defaults to date.today())

        Returns:
            AwardPointsResult
        """
        if today is None:
            today = date.today()

        source = source or action
        if source_id is not None:
            source_id = str(source_id)

        # 1. Validate action (domain)
        try:
            base_points(action, self.catalog)
        except InvalidActionError as e:
            logger.warning(f"Rejected award for user {user.id}: {e}")
            return AwardPointsResult(success=False, error_message=str(e))

        # 2. Duplicate check (repository)
        existing = await points_repo.find_transaction(user, source, source_id)
        if existing:
            return self._duplicate(user, source, source_id)

        # 3. Context (domain)
        festival = festival or detect_festival(self.catalog, today)
        context = derive_context_flags(
            joined_on=user.joined_on,
            today=today,
            birth_month=user.birth_month,
            is_premium=user.is_premium,
            is_expert=user.is_expert,
            is_community_leader=user.is_community_leader,
            is_festival_period=is_festival_period,
            new_user_window_days=self.new_user_window_days,
        )

        # 4. Calculate award (domain)
        current = await points_repo.get_points(user)
        total_before = current.total_lifetime_points if current else 0

        award = award_points(
            action,
            total_before,
            self.catalog,
            context=context,
            city=user.location,
            festival=festival,
            dog_breed=dog_breed,
        )

        # 5. Persist (repository)
        try:
            transaction = await points_repo.record_award(
                user,
                points=award.points,
                level=award.new_level,
                source=source,
                source_id=source_id,
                action=action,
                description=describe_award(action, award.multiplier, self.catalog),
                multiplier=award.multiplier,
            )
        except IntegrityError:
            # Lost the race against a concurrent award for the same source
            return self._duplicate(user, source, source_id)

        logger.info(
            f"User {user.id} +{award.points} points for {action} "
            f"(x{award.multiplier}, level {award.new_level})"
        )
        if award.leveled_up:
            logger.info(f"User {user.id} reached level {award.new_level}")

        return AwardPointsResult(
            success=True,
            points_awarded=award.points,
            multiplier=award.multiplier,
            new_level=award.new_level,
            leveled_up=award.leveled_up,
            points_to_next_level=award.points_to_next_level,
            total_lifetime_points=award.total_lifetime_points,
            transaction_id=transaction.id,
        )

    def _duplicate(
        self, user: User, source: str, source_id: str | None
    ) -> AwardPointsResult:
        logger.warning(
            f"Duplicate award for user {user.id}: {source}/{source_id} already awarded"
        )
        return AwardPointsResult(
            success=False,
            duplicate=True,
            error_message="Points already awarded for this action",
        )
