"""ProviderAdapter — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from typing import Optional

from openai import Omit

from src.config import Credentials
from src.constants import OPENAI_ORGANIZATION_HEADER, OPENAI_PROJECT_HEADER
from src.transcription.outcome import AdapterResult

# Merged into every client's default_headers so the SDK never sends account ids.
NO_ACCOUNT_HEADERS = {
    OPENAI_ORGANIZATION_HEADER: Omit(),
    OPENAI_PROJECT_HEADER: Omit(),
}


class ProviderAdapter(ABC):
    #: Provider identifier used in logs and attempt records.
    name: str
    #: Model identifier sent to the provider.
    model: str
    #: Credentials attribute holding this provider's key.
    credential_field: str

    def api_key(self, credentials: Credentials) -> Optional[str]:
        return getattr(credentials, self.credential_field) or None

    @abstractmethod
    async def send(self, audio: bytes, api_key: str) -> AdapterResult:
        """Transcribe raw audio bytes. Returns Failure instead of raising on provider errors."""
        ...
