"""
Profile Service.

Resolves which table to read, performs the point lookup and maps the stored
item onto the Profile model.
"""

from __future__ import annotations

from typing import Optional

from models.profile import Profile, ProfileRequest
from repositories.dynamodb_repo import ProfileRepository
from utils.logging_config import get_logger
from utils.settings import Settings

logger = get_logger(__name__)


class ProfileService:
    """Service for foodie bucks profile retrieval."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        repository: Optional[ProfileRepository] = None,
    ):
        self.settings = settings or Settings.from_environment()
        self.repository = repository or ProfileRepository(self.settings)

    def get_profile(self, request: ProfileRequest) -> Optional[Profile]:
        """
        Look up one profile.

        Returns None when no item exists for the key pair so callers can tell
        a missing record from a stored one with zero balances. StoreError from
        the repository propagates unchanged.
        """
        table_name = self.settings.resolve_table_name(request.table_name)
        item = self.repository.get_item(table_name, request.pk, request.sk)
        if item is None:
            logger.info(
                "Profile not found",
                extra={"table": table_name, "pk": request.pk, "sk": request.sk},
            )
            return None

        profile = Profile.from_item(item)
        logger.info("Profile fetched", extra={"table": table_name, "pk": profile.partition_key})
        return profile
