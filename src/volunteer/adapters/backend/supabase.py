# src/volunteer/adapters/backend/supabase.py
"""
Supabase Backend Adapter for Volunteer Signup

This module implements the Supabase client used by the signup pages. It
posts applicant data to Edge Functions and reads interest reference lists
from the REST API.

Each operation makes exactly one HTTP request. The blocking requests call
runs in the event loop's default executor so callers can await it. Failures
never raise: writes return OperationResult(False, <message>) and reads
return an empty list.

The Edge Functions disagree on conventions, and each one is followed as-is:
- create-volunteer and email-link take camelCase JSON keys
- update-interests and update-volunteer take keys exactly as written
- update-* report raw status and body on failure; the others use fixed
  user-facing messages

Files that USE this module:
- volunteer.app (build_backend wires SupabaseBackend)
- tests.test_backend (unit tests)

Files that this module USES:
- volunteer.adapters.backend.base (VolunteerBackend interface)
- volunteer.config (settings for endpoints, API key and HTTP timeout)
- volunteer.domain.models (Interest, InterestCategory, OperationResult, VolunteerMessage)
- volunteer.shared.casing (camelCase payload keys)
"""
import asyncio
import logging
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urljoin

import requests

from volunteer.adapters.backend.base import VolunteerBackend
from volunteer.config import BackendSettings, EmailSettings, settings
from volunteer.domain.models import Interest, InterestCategory, OperationResult, VolunteerMessage
from volunteer.shared.casing import camel_case_keys

log = logging.getLogger(__name__)

PROFILE_EXISTS_MESSAGE = "A profile already exists for this account."
MISSING_FIELDS_MESSAGE = "Please ensure all required fields are filled out correctly."
SUBMIT_FAILED_MESSAGE = "Unable to submit your information at this time. Please try again later."
SIGNUP_EMAIL_FAILED_MESSAGE = "Unable to send signup email at this time. Please try again later."

INTEREST_COLUMNS = "id,interest,interest_type_id,order_by"

_CATEGORY_LABELS = {
    InterestCategory.GENERAL: "interests",
    InterestCategory.OUTREACH_SUB_COMMITTEE: "outreach sub-committee items",
    InterestCategory.STANDING_COMMITTEE: "standing committee items",
    InterestCategory.LANGUAGES: "languages",
}


def _is_success(resp: requests.Response) -> bool:
    return 200 <= resp.status_code < 300


def _bearer(auth_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {auth_token}"}


def _category_label(category_id: int) -> str:
    try:
        return _CATEGORY_LABELS[InterestCategory(category_id)]
    except ValueError:
        return f"interest type {category_id} items"


class SupabaseBackend(VolunteerBackend):
    """
    Supabase adapter for the volunteer signup flow.

    Settings are read-only after construction and the session is the only
    shared resource, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        backend_settings: Optional[BackendSettings] = None,
        email_settings: Optional[EmailSettings] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the Supabase adapter.

        Args:
            backend_settings: Endpoint URLs and anon key (defaults to settings.backend)
            email_settings: Outbound-email metadata (defaults to settings.email)
            session: Optional requests session (a new one is created otherwise)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.settings = backend_settings or settings.backend
        self.email_settings = email_settings or settings.email
        self.session = session or requests.Session()
        self.timeout = timeout or settings.http_timeout_seconds

        if not self.settings.url:
            log.warning("SUPABASE_URL not configured - interest lists will be empty")
        log.debug(
            "Supabase adapter initialized with url=%s, anon_key_length=%d, timeout=%ss",
            self.settings.url, len(self.settings.anon_key), self.timeout,
        )

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "SupabaseBackend":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _endpoint(self, url: str) -> str:
        """
        Resolve an endpoint URL against the Supabase base URL.

        Raises:
            ValueError: If the endpoint is not configured
        """
        if not url:
            raise ValueError("Endpoint URL is not configured")
        if not self.settings.url:
            return url
        return urljoin(self.settings.url.rstrip("/") + "/", url)

    async def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        payload: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """Run one blocking request in the default executor and await it."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            lambda: self.session.request(
                method,
                url,
                headers=headers,
                json=payload,
                timeout=self.timeout,
            ),
        )

    # ------------------------------------------------------------------ writes

    async def submit_volunteer_application(
        self, message: VolunteerMessage, auth_token: str
    ) -> OperationResult:
        """
        Create the volunteer profile through the create-volunteer Edge Function.

        Only first name, last name, phone, zip and body are sent. Email and
        address fields on the message are not part of this request.

        Returns:
            (True, "") on 2xx, otherwise (False, <user-facing message>)
        """
        try:
            log.info("Creating volunteer profile via create-volunteer Edge Function")

            payload = camel_case_keys({
                "first_name": message.first_name,
                "last_name": message.last_name,
                "phone_number": message.phone_number,
                "zip": message.zip,
                "body": message.body,
            })

            resp = await self._send(
                "POST",
                self._endpoint(self.settings.create_volunteer_url),
                headers=_bearer(auth_token),
                payload=payload,
            )

            if _is_success(resp):
                log.info("Volunteer profile created successfully")
                return OperationResult(True, "")

            if resp.status_code == HTTPStatus.CONFLICT:
                log.warning("Profile already exists for this user")
                return OperationResult(False, PROFILE_EXISTS_MESSAGE)

            if resp.status_code == HTTPStatus.BAD_REQUEST:
                log.error("Bad request: missing required fields. Error: %s", resp.text)
                return OperationResult(False, MISSING_FIELDS_MESSAGE)

            log.error("Failed to create profile. Status: %s, Error: %s", resp.status_code, resp.text)
            return OperationResult(False, SUBMIT_FAILED_MESSAGE)

        except Exception as e:
            log.error("Exception occurred while creating volunteer profile: %s", e, exc_info=True)
            return OperationResult(False, SUBMIT_FAILED_MESSAGE)

    async def send_signup_email(
        self, email: str, redirect_url: str, body: str = ""
    ) -> OperationResult:
        """
        Ask the email-link Edge Function to send a sign-in link.

        Authenticates with the apikey header, and only when an anon key is
        configured. No Authorization header is sent.
        """
        try:
            log.info("Sending signup email request to Supabase Edge Function")

            payload = camel_case_keys({
                "to": email,
                "redirectTo": redirect_url,
                "body": body,
            })

            headers: Dict[str, str] = {}
            if self.settings.anon_key:
                headers["apikey"] = self.settings.anon_key

            resp = await self._send(
                "POST",
                self._endpoint(self.settings.email_link_url),
                headers=headers,
                payload=payload,
            )

            if _is_success(resp):
                log.info("Signup email sent successfully to %s", email)
                return OperationResult(True, "")

            log.error("Failed to send signup email. Status: %s, Error: %s", resp.status_code, resp.text)
            return OperationResult(False, SIGNUP_EMAIL_FAILED_MESSAGE)

        except Exception as e:
            log.error("Exception occurred while sending signup email: %s", e, exc_info=True)
            return OperationResult(False, SIGNUP_EMAIL_FAILED_MESSAGE)

    async def update_volunteer_interests(
        self, email: str, interest_ids: Sequence[int], auth_token: str
    ) -> OperationResult:
        """
        Replace the volunteer's interests through the update-interests Edge Function.

        Keys are sent as Email/InterestIds. Failures report the raw status
        code and response body.
        """
        try:
            log.info("Updating volunteer interests for %s", email)

            payload = {
                "Email": email,
                "InterestIds": list(interest_ids),
            }

            resp = await self._send(
                "POST",
                self._endpoint(self.settings.update_interests_url),
                headers=_bearer(auth_token),
                payload=payload,
            )

            if _is_success(resp):
                log.info("Volunteer interests updated successfully")
                return OperationResult(True, "")

            log.error(
                "Failed to update volunteer interests. Status: %s, Error: %s",
                resp.status_code, resp.text,
            )
            return OperationResult(False, f"Status {resp.status_code}: {resp.text}")

        except Exception as e:
            log.error("Exception occurred while updating volunteer interests: %s", e, exc_info=True)
            return OperationResult(False, f"Exception: {e}")

    async def update_volunteer_profile(
        self, email: str, about_myself: str, emergency_contact: str, auth_token: str
    ) -> OperationResult:
        """
        Update profile text through the update-volunteer Edge Function.

        Same key and failure-reporting conventions as update_volunteer_interests.
        """
        try:
            log.info("Updating volunteer info for %s", email)

            payload = {
                "Email": email,
                "AboutMyself": about_myself,
                "EmergencyContact": emergency_contact,
            }

            resp = await self._send(
                "POST",
                self._endpoint(self.settings.update_volunteer_url),
                headers=_bearer(auth_token),
                payload=payload,
            )

            if _is_success(resp):
                log.info("Volunteer info updated successfully")
                return OperationResult(True, "")

            log.error(
                "Failed to update volunteer info. Status: %s, Error: %s",
                resp.status_code, resp.text,
            )
            return OperationResult(False, f"Status {resp.status_code}: {resp.text}")

        except Exception as e:
            log.error("Exception occurred while updating volunteer info: %s", e, exc_info=True)
            return OperationResult(False, f"Exception: {e}")

    # ------------------------------------------------------------------- reads

    def _interest_query_url(self, category_id: int) -> str:
        # Written out literally: PostgREST expects the commas in select unescaped
        return (
            f"{self.settings.interest_url}"
            f"?select={INTEREST_COLUMNS}"
            f"&interest_type_id=eq.{int(category_id)}"
            f"&order=order_by.asc"
        )

    @staticmethod
    def _parse_interests(resp: requests.Response) -> List[Interest]:
        """
        Parse a 2xx response body into Interest records, order preserved.

        An empty or null body yields an empty list.

        Raises:
            ValueError: If the body is not valid JSON
            InvalidInterestRecordError: If a record is malformed
        """
        if not resp.content:
            return []

        data = resp.json()
        if data is None:
            return []
        if not isinstance(data, list):
            log.warning("Unexpected interest response type: %r", type(data))
            return []
        return [Interest.from_dict(item) for item in data]

    async def fetch_interest_list(
        self, category_id: int, auth_token: Optional[str] = None
    ) -> List[Interest]:
        """
        Fetch one interest category ordered by order_by.

        Always sends the apikey header; adds a bearer token only when one
        is given. Any failure, including a bad response body, yields [] and
        callers cannot tell it apart from an empty category.
        """
        label = _category_label(category_id)
        try:
            log.info("Fetching %s from Supabase", label)

            headers = {
                "apikey": self.settings.anon_key,
                "Accept": "application/json",
            }
            if auth_token:
                headers.update(_bearer(auth_token))

            resp = await self._send("GET", self._interest_query_url(category_id), headers=headers)

            if _is_success(resp):
                items = self._parse_interests(resp)
                log.info("Successfully fetched %d %s", len(items), label)
                return items

            log.error("Failed to fetch %s. Status: %s, Error: %s", label, resp.status_code, resp.text)
            return []

        except Exception as e:
            log.error("Exception occurred while fetching %s from Supabase: %s", label, e, exc_info=True)
            return []
