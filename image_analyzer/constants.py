"""All magic values live here — no inline literals anywhere else."""

# Telegram typing indicator re-send interval (seconds).
# The TYPING action expires after ~5 s, so we refresh every 4 s.
TELEGRAM_TYPING_INTERVAL: float = 4.0

# Telegram rejects messages longer than this.
TELEGRAM_MESSAGE_LIMIT = 4096

# Vision providers
PROVIDER_GEMINI = "gemini"
PROVIDER_CLAUDE = "claude"
PROVIDER_OPENAI = "openai"
VISION_PROVIDERS = (PROVIDER_GEMINI, PROVIDER_CLAUDE, PROVIDER_OPENAI)
DEFAULT_VISION_PROVIDER = PROVIDER_GEMINI

GEMINI_VISION_MODEL = "gemini-2.5-flash"
CLAUDE_VISION_MODEL = "claude-sonnet-4-5"
OPENAI_VISION_MODEL = "gpt-4o"
DEFAULT_VISION_MODELS = {
    PROVIDER_GEMINI: GEMINI_VISION_MODEL,
    PROVIDER_CLAUDE: CLAUDE_VISION_MODEL,
    PROVIDER_OPENAI: OPENAI_VISION_MODEL,
}
PROVIDER_KEY_VARS = {
    PROVIDER_GEMINI: "GEMINI_API_KEY",
    PROVIDER_CLAUDE: "ANTHROPIC_API_KEY",
    PROVIDER_OPENAI: "OPENAI_API_KEY",
}

CLAUDE_MAX_TOKENS = 4096
CLAUDE_TOOL_NAME = "record_image_analysis"
CLAUDE_TOOL_DESCRIPTION = "Record the structured analysis of the provided image."
OPENAI_SCHEMA_NAME = "image_analysis"
JSON_MIME_TYPE = "application/json"

# Analysis contract
SENTINEL_UNCERTAIN = "uncertain"
SENTINEL_UNAVAILABLE = "unavailable"
ANALYZE_PROMPT = "Analyze this image based on your instructions."

# Languages offered in /language; any other name is accepted as-is.
SUPPORTED_LANGUAGES = ("English", "Armenian")
DEFAULT_LANGUAGE = "English"

# Photos sent through Telegram's compressed photo path are always JPEG.
TELEGRAM_PHOTO_MIME_TYPE = "image/jpeg"

DEFAULT_LANGUAGE_STORE_PATH = ".chat_languages.json"

# Log messages
MSG_BOT_STARTING = "Starting image analyzer bot…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_SEND_FAIL = "✗ Send failed"
MSG_ANALYSIS_OK = "✓ Analysis done (%.1fs)"
MSG_ANALYSIS_ERROR = "✗ Analysis failed (%.1fs)"
MSG_CALLING_PROVIDER = "→ %s (%s)"

# User-facing messages
MSG_NO_IMAGE = "Please upload an image first."
MSG_ANALYSIS_FAILED = "Analysis failed: the vision service could not analyze the image."
MSG_INVALID_RESPONSE = "Analysis failed: the vision service returned an invalid analysis response."
MSG_ANALYSIS_IN_PROGRESS = "Analysis already in progress, please wait."
MSG_ANALYSIS_STARTED = "Performing deep analysis…"
MSG_IMAGE_RECEIVED = "Image received. Send /analyze to analyze it in %s."
MSG_IMAGE_DOWNLOAD_FAILED = "Could not download the image — please send it again."
MSG_IDLE_NO_RESULT = "Analysis results will appear here."
MSG_NO_TEXT_IN_IMAGE = "No text detected in the image."
MSG_SENSITIVE = "Sensitive Content Potentially Detected"
MSG_NOT_SENSITIVE = "No Sensitive Content Detected"

# /language command
CMD_ANALYZE = "analyze"
CMD_LANGUAGE = "language"
CMD_STATUS = "status"
CMD_HELP = "help"
CMD_START = "start"
MSG_LANGUAGE_SET = "Output language set to: %s"
MSG_LANGUAGE_CURRENT = (
    "Current output language: %s\n"
    "Suggested: %s\n"
    "Usage: /language <name>"
)

MSG_STATUS = (
    "Status\n"
    "  Provider : %s\n"
    "  Model    : %s\n"
    "  Language : %s\n"
    "  Image    : %s\n"
    "  State    : %s\n"
)

MSG_HELP = (
    "Image Analyzer — structured image descriptions on Telegram\n"
    "\n"
    "1. Send a photo (or an image file)\n"
    "2. Optionally pick a language with /language <name>\n"
    "3. Send /analyze\n"
    "\n"
    "Commands:\n"
    "  /analyze            — analyze the last image you sent\n"
    "  /language           — show the output language\n"
    "  /language <name>    — switch output language (e.g. English, Armenian)\n"
    "  /status             — current setup at a glance\n"
    "  /help               — show this message\n"
)
