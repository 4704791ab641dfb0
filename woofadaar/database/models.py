"""
Database models for Woofadaar gamification.

Structure:
- User: pet parent with the facts that drive point multipliers
- UserPoints: balances, lifetime points and level
- PointTransaction: one row per award, unique per (user, source, source_id)
- UserAchievement: unlocked achievements, unique per (user, achievement_id)
- UserChainProgress: current level per achievement chain
"""

from tortoise import fields, models


class User(models.Model):
    """Platform user (pet parent)."""

    id = fields.IntField(primary_key=True)
    email = fields.CharField(max_length=255, unique=True, db_index=True)
    name = fields.CharField(max_length=255, null=True)

    # Used for the regional bonus
    location = fields.CharField(max_length=100, null=True)

    is_premium = fields.BooleanField(default=False)
    is_expert = fields.BooleanField(default=False)
    is_community_leader = fields.BooleanField(default=False)
    birth_month = fields.IntField(null=True)  # 1-12

    joined_on = fields.DateField()
    created_at = fields.DatetimeField(auto_now_add=True)

    points: fields.ReverseRelation["UserPoints"]
    transactions: fields.ReverseRelation["PointTransaction"]
    achievements: fields.ReverseRelation["UserAchievement"]
    chain_progress: fields.ReverseRelation["UserChainProgress"]

    class Meta:
        table = "users"


class UserPoints(models.Model):
    """Point balances for a user (one row per user)."""

    id = fields.IntField(primary_key=True)
    user: fields.OneToOneRelation[User] = fields.OneToOneField(
        "models.User", related_name="points", on_delete=fields.CASCADE
    )
    user_id: int

    points_earned = fields.IntField(default=0)
    points_spent = fields.IntField(default=0)
    current_balance = fields.IntField(default=0)
    total_lifetime_points = fields.IntField(default=0)
    level = fields.IntField(default=1)

    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "user_points"


class PointTransaction(models.Model):
    """
    A single point award.

    source/source_id identify what earned the points (e.g. "answer", "42").
    The unique constraint enforces at-most-once awards when source_id is set.
    """

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="transactions", on_delete=fields.CASCADE
    )
    user_id: int

    points_amount = fields.IntField()
    # earned | spent
    transaction_type = fields.CharField(max_length=10, default="earned")
    action = fields.CharField(max_length=50, null=True)
    source = fields.CharField(max_length=50)
    source_id = fields.CharField(max_length=100, null=True)
    description = fields.CharField(max_length=255)
    multiplier_applied = fields.FloatField(default=1.0)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "point_transactions"
        unique_together = (("user", "source", "source_id"),)


class UserAchievement(models.Model):
    """Achievement unlocked by a user (standalone or chain level)."""

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="achievements", on_delete=fields.CASCADE
    )
    user_id: int

    achievement_id = fields.CharField(max_length=100)
    chain_id = fields.CharField(max_length=100, null=True)
    is_hidden = fields.BooleanField(default=False)
    unlocked_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "user_achievements"
        unique_together = (("user", "achievement_id"),)


class UserChainProgress(models.Model):
    """Current level of a user in an achievement chain. Only ever increases."""

    id = fields.IntField(primary_key=True)
    user: fields.ForeignKeyRelation[User] = fields.ForeignKeyField(
        "models.User", related_name="chain_progress", on_delete=fields.CASCADE
    )
    user_id: int

    chain_id = fields.CharField(max_length=100)
    current_level = fields.IntField(default=0)
    completed_at = fields.DatetimeField(null=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "user_chain_progress"
        unique_together = (("user", "chain_id"),)
