"""In-memory store of saved parent profiles.

Profiles let a parent's figures be reused across calculations. The store
deduplicates by financial signature, hides archived profiles, and rejects
stale updates using each profile's ``row_version``.
"""

import threading
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

import structlog

from .models import ParentData, ParentProfile

logger = structlog.get_logger()

MAX_LIST_RESULTS = 100


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ParentProfileService:
    """Thread-safe CRUD store for ``ParentProfile`` records."""

    def __init__(self) -> None:
        self._profiles: dict[UUID, ParentProfile] = {}
        self._lock = threading.Lock()

    def list(
        self,
        search: Optional[str] = None,
        owner_user_id: Optional[UUID] = None,
    ) -> list[ParentProfile]:
        """List active profiles ordered by display name.

        Args:
            search: Case-insensitive substring of the display name
            owner_user_id: Only profiles owned by this user

        Returns:
            At most 100 profiles
        """
        with self._lock:
            profiles = [p for p in self._profiles.values() if not p.is_archived]

        if search and search.strip():
            needle = search.strip().lower()
            profiles = [p for p in profiles if needle in p.display_name.lower()]
        if owner_user_id is not None:
            profiles = [p for p in profiles if p.owner_user_id == owner_user_id]

        profiles.sort(key=lambda p: p.display_name)
        return profiles[:MAX_LIST_RESULTS]

    def get(self, profile_id: UUID) -> Optional[ParentProfile]:
        """Return an active profile by id, or None."""
        with self._lock:
            profile = self._profiles.get(profile_id)
        if profile is None or profile.is_archived:
            return None
        return profile

    def create(
        self,
        data: ParentData,
        display_name: str,
        owner_user_id: Optional[UUID] = None,
    ) -> ParentProfile:
        """Save a new profile from parent data."""
        profile = ParentProfile(
            display_name=display_name,
            owner_user_id=owner_user_id,
            monthly_gross_income=data.monthly_gross_income,
            preexisting_child_support=data.preexisting_child_support,
            preexisting_alimony=data.preexisting_alimony,
            work_related_childcare_costs=data.work_related_childcare_costs,
            healthcare_coverage_costs=data.healthcare_coverage_costs,
            has_primary_custody=data.has_primary_custody,
        )
        with self._lock:
            self._profiles[profile.id] = profile
        logger.info("parent_profile_created", profile_id=str(profile.id))
        return profile

    def update(self, profile: ParentProfile) -> bool:
        """Store an edited profile.

        The write succeeds only if ``profile.row_version`` matches the stored
        version; the stored copy then gets a new version and ``updated_utc``.

        Returns:
            True if stored, False for an unknown id or a stale version
        """
        with self._lock:
            current = self._profiles.get(profile.id)
            if current is None:
                return False
            if current.row_version != profile.row_version:
                logger.warning(
                    "parent_profile_concurrency_conflict",
                    profile_id=str(profile.id),
                    expected_version=current.row_version,
                    actual_version=profile.row_version,
                )
                return False
            self._profiles[profile.id] = profile.model_copy(
                update={
                    "row_version": current.row_version + 1,
                    "updated_utc": _utc_now(),
                    "created_utc": current.created_utc,
                }
            )
        logger.info("parent_profile_updated", profile_id=str(profile.id))
        return True

    def archive(self, profile_id: UUID) -> bool:
        """Hide a profile from listings and lookups.

        Returns:
            False if the profile does not exist or is already archived
        """
        with self._lock:
            current = self._profiles.get(profile_id)
            if current is None or current.is_archived:
                return False
            self._profiles[profile_id] = current.model_copy(
                update={
                    "is_archived": True,
                    "updated_utc": _utc_now(),
                    "row_version": current.row_version + 1,
                }
            )
        logger.info("parent_profile_archived", profile_id=str(profile_id))
        return True

    def find_duplicate(
        self,
        data: ParentData,
        display_name: Optional[str] = None,
    ) -> Optional[ParentProfile]:
        """Find the oldest active profile with the same financial figures.

        Args:
            data: Figures to match
            display_name: If given, the display name must also match
        """
        signature = data.financial_signature
        name = display_name.strip() if display_name and display_name.strip() else None

        with self._lock:
            candidates = [
                p for p in self._profiles.values()
                if not p.is_archived and p.financial_signature == signature
            ]
        if name is not None:
            candidates = [p for p in candidates if p.display_name == name]
        if not candidates:
            return None
        return min(candidates, key=lambda p: p.created_utc)

    def get_or_create(
        self,
        data: ParentData,
        display_name_hint: Optional[str] = None,
    ) -> ParentProfile:
        """Return a matching profile, creating one if none exists.

        Without a name hint the new profile is named ``Parent YYYYMMDD-HHMMSS``.
        """
        existing = self.find_duplicate(data, display_name_hint)
        if existing is not None:
            return existing

        if display_name_hint and display_name_hint.strip():
            display_name = display_name_hint.strip()
        else:
            display_name = f"Parent {_utc_now():%Y%m%d-%H%M%S}"
        return self.create(data, display_name)
