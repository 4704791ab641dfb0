"""
Points Repository - balances and point transactions.

Duplicate awards for the same (user, source, source_id) are rejected by the
unique constraint on PointTransaction; record_award() lets the IntegrityError
propagate and rolls back the balance update.
"""

from tortoise.expressions import F
from tortoise.transactions import in_transaction

from woofadaar.database.models import PointTransaction, User, UserPoints


async def get_points(user: User) -> UserPoints | None:
    return await UserPoints.get_or_none(user=user)


async def get_or_create_points(user: User) -> UserPoints:
    points, _ = await UserPoints.get_or_create(user=user)
    return points


async def find_transaction(
    user: User, source: str, source_id: str | None
) -> PointTransaction | None:
    """Existing transaction for this source, None if never awarded."""
    if source_id is None:
        return None
    return await PointTransaction.get_or_none(
        user=user, source=source, source_id=source_id
    )


async def record_award(
    user: User,
    points: int,
    level: int,
    source: str,
    description: str,
    source_id: str | None = None,
    action: str | None = None,
    multiplier: float = 1.0,
) -> PointTransaction:
    """
    Create the transaction and add the points to the user's balances atomically.

    Raises:
        tortoise.exceptions.IntegrityError: already awarded for this source
    """
    async with in_transaction() as conn:
        transaction = await PointTransaction.create(
            user=user,
            points_amount=points,
            transaction_type="earned",
            action=action,
            source=source,
            source_id=source_id,
            description=description,
            multiplier_applied=multiplier,
            using_db=conn,
        )

        user_points = await UserPoints.filter(user=user).using_db(conn).first()
        if user_points is None:
            user_points = await UserPoints.create(user=user, using_db=conn)

        await UserPoints.filter(id=user_points.id).using_db(conn).update(
            points_earned=F("points_earned") + points,
            current_balance=F("current_balance") + points,
            total_lifetime_points=F("total_lifetime_points") + points,
            level=level,
        )

    return transaction


async def set_level(user_points: UserPoints, level: int) -> UserPoints:
    user_points.level = level
    await user_points.save(update_fields=["level", "updated_at"])
    return user_points


async def list_points(batch_size: int = 500):
    """Iterate over every UserPoints row in id order."""
    offset = 0
    while True:
        batch = await UserPoints.all().order_by("id").offset(offset).limit(batch_size)
        if not batch:
            break
        for row in batch:
            yield row
        offset += batch_size
