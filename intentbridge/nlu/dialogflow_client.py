# Role: Minimal wrapper around the Dialogflow Sessions API. Centralizes project, credentials, language code
# and the "no intent matched" rule, so the rest of the code calls a single method: detect_intent(message).

from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from google.cloud import dialogflow_v2 as dialogflow
from google.oauth2 import service_account

from intentbridge.models.intent_result import IntentResult

logger = logging.getLogger(__name__)

LANGUAGE_CODE = "en-US"


class NoIntentMatchedError(RuntimeError):
    """Dialogflow answered but produced no fulfillment text."""

    def __init__(self, message: str = "No intent matched") -> None:
        super().__init__(message)


class DialogflowIntentClient:
    def __init__(
        self,
        project_id: Optional[str],
        credentials_path: Optional[str] = None,
        sessions_client: Optional[Any] = None,
    ) -> None:
        # Key lines:
        # - Configuration is passed in explicitly (nothing is written back to os.environ).
        # - sessions_client is injectable for testing/mocking.
        if not project_id:
            raise RuntimeError("Missing PROJECT_ID in environment or .env")

        self.project_id = project_id
        self.credentials_path = credentials_path
        self._sessions = sessions_client or self._build_sessions_client()

    def _build_sessions_client(self) -> dialogflow.SessionsAsyncClient:
        # Without an explicit file, google-auth falls back to Application Default Credentials.
        if self.credentials_path:
            credentials = service_account.Credentials.from_service_account_file(self.credentials_path)
            return dialogflow.SessionsAsyncClient(credentials=credentials)
        return dialogflow.SessionsAsyncClient()

    def new_session_path(self) -> str:
        # Key line: every call is a brand-new conversation, session ids are never reused.
        return dialogflow.SessionsAsyncClient.session_path(self.project_id, str(uuid.uuid4()))

    async def detect_intent(self, message: Optional[str]) -> IntentResult:
        # 1) Build a session-scoped text query
        # 2) Call Dialogflow once (no retry, no timeout)
        # 3) Require a non-empty fulfillment text
        session = self.new_session_path()
        text_input = dialogflow.TextInput(text=message or "", language_code=LANGUAGE_CODE)
        query_input = dialogflow.QueryInput(text=text_input)

        # Key line: retry=None switches off the library's default retry policy (single attempt).
        response = await self._sessions.detect_intent(
            request={"session": session, "query_input": query_input},
            retry=None,
        )

        query_result = response.query_result
        logger.debug(
            "detect_intent session=%s query_text=%r fulfillment_text=%r",
            session,
            query_result.query_text,
            query_result.fulfillment_text,
        )

        if not query_result.fulfillment_text:
            raise NoIntentMatchedError()

        return IntentResult(user=query_result.query_text, bot=query_result.fulfillment_text)

    async def close(self) -> None:
        await self._sessions.transport.close()
