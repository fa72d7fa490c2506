"""Constants used throughout the application."""

# Credential values shipped in sample .env files; never a real key
PLACEHOLDER_API_KEYS = frozenset({
    "your-gemini-api-key",
    "your-openai-api-key",
    "your-api-key",
    "test-key",
    "changeme",
})

# AI backend
AI_TEMPERATURE = 0.2
AI_PROVIDERS = ("gemini", "openai", "none")

# Prompt files
SIMILARITY_PROMPT_FILE = "similarity_review.txt"

# Internal application lifecycle
DRAFT_STATUS = "DRAFT"
