# src/volunteer/adapters/backend/base.py
"""
Base Backend Interface for the Volunteer Signup Service

This module defines the abstract base class for backend adapters.
It establishes the contract the UI layer codes against: every write
returns an OperationResult and every read returns a list of Interest,
and no operation raises to its caller.

Files that USE this module:
- volunteer.adapters.backend.supabase (SupabaseBackend implements VolunteerBackend)
- volunteer.app (type of the wired adapter)
- tests.test_backend (unit tests)

Files that this module USES:
- volunteer.domain.models (Interest, InterestCategory, OperationResult, VolunteerMessage)
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from volunteer.domain.models import Interest, InterestCategory, OperationResult, VolunteerMessage


class VolunteerBackend(ABC):
    @abstractmethod
    async def submit_volunteer_application(
        self, message: VolunteerMessage, auth_token: str
    ) -> OperationResult:
        """Create the volunteer profile for the signed-in user."""
        raise NotImplementedError

    @abstractmethod
    async def send_signup_email(
        self, email: str, redirect_url: str, body: str = ""
    ) -> OperationResult:
        """Send the sign-in link email that starts a signup."""
        raise NotImplementedError

    @abstractmethod
    async def update_volunteer_interests(
        self, email: str, interest_ids: Sequence[int], auth_token: str
    ) -> OperationResult:
        """Replace the volunteer's selected interests."""
        raise NotImplementedError

    @abstractmethod
    async def update_volunteer_profile(
        self, email: str, about_myself: str, emergency_contact: str, auth_token: str
    ) -> OperationResult:
        """Update the free-text parts of the volunteer profile."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_interest_list(
        self, category_id: int, auth_token: Optional[str] = None
    ) -> List[Interest]:
        """Return the interests of one category, empty on any failure."""
        raise NotImplementedError

    async def get_interests(self, auth_token: Optional[str] = None) -> List[Interest]:
        return await self.fetch_interest_list(InterestCategory.GENERAL, auth_token)

    async def get_outreach_sub_committee(self, auth_token: Optional[str] = None) -> List[Interest]:
        return await self.fetch_interest_list(InterestCategory.OUTREACH_SUB_COMMITTEE, auth_token)

    async def get_standing_committee(self, auth_token: Optional[str] = None) -> List[Interest]:
        return await self.fetch_interest_list(InterestCategory.STANDING_COMMITTEE, auth_token)

    async def get_languages(self, auth_token: Optional[str] = None) -> List[Interest]:
        return await self.fetch_interest_list(InterestCategory.LANGUAGES, auth_token)
