"""All magic values live here — no inline literals anywhere else."""

# Configuration defaults
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_APP_URL = "https://zabran-broadcast.com"
DEFAULT_APP_TITLE = "Zabran Broadcast"
DEFAULT_LANGUAGE = "id"
DEFAULT_WHISPER_TIMEOUT = "30"

# Multimodal chat provider (OpenRouter)
OPENROUTER_NAME = "openrouter"
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_MODEL = "xiaomi/mimo-v2-flash"
OPENROUTER_REFERER_HEADER = "HTTP-Referer"
OPENROUTER_TITLE_HEADER = "X-Title"
TRANSCRIBE_PROMPT = (
    "Transcribe this audio. Output ONLY the spoken text. No intro, no outliers."
)

# Whisper-compatible providers
GROQ_NAME = "groq"
GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_WHISPER_MODEL = "whisper-large-v3"
OPENAI_NAME = "openai"
OPENAI_BASE_URL = "https://api.openai.com/v1"
WHISPER_MODEL = "whisper-1"
WHISPER_RESPONSE_FORMAT = "json"

# Voice notes arrive as OGG/Opus
VOICE_FILENAME = "voice.ogg"
AUDIO_FORMAT = "ogg"

# Log messages
MSG_NO_CREDENTIALS = "[STT] No API key found (OPENROUTER, GROQ, or OPENAI)"
MSG_TRYING_PROVIDER = "[STT] Transcribing via %s (%s)…"
MSG_PROVIDER_OK = "[STT] %s result: %r"
MSG_PROVIDER_FAILED = "[STT] %s failed: %s"
MSG_PROVIDER_CRASHED = "[STT] %s raised unexpectedly"
MSG_FALLING_BACK = "[STT] Falling back to other providers if available…"
MSG_ALL_FAILED = "[STT] All transcription attempts failed: %s"
MSG_EMPTY_CONTENT = "empty content in response"
MSG_NO_CHOICES = "no choices in response"
MSG_AUDIO_UNREADABLE = "audio unreadable: %s"

# CLI
MSG_USAGE = (
    "Usage:\n"
    "  python -m src.main <audio-file> [<audio-file> ...]\n"
    "  python -m src.main --status"
)
CMD_STATUS = "--status"
MSG_STATUS_HEADER = "Transcription providers (in fallback order):"
MSG_STATUS_LINE = "  %-10s : %s"
MSG_RESULT_LINE = "%s: %s"
MSG_NO_TRANSCRIPT = "(no transcript)"

# Account headers the openai SDK fills from OPENAI_ORG_ID / OPENAI_PROJECT_ID
OPENAI_ORGANIZATION_HEADER = "OpenAI-Organization"
OPENAI_PROJECT_HEADER = "OpenAI-Project"
