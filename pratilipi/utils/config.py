import os
from pathlib import Path
from dotenv import load_dotenv

class Config:
    def __init__(self):
        # Load appropriate .env file based on environment
        self.env = os.getenv("PRATILIPI_ENV", "dev")
        self._load_env_file()

        # Project paths
        self.package_root = Path(__file__).parent.parent
        self.project_root = self.package_root.parent
        self.policy_file = Path(os.getenv("SIMILARITY_POLICY_FILE", self.project_root / "similarity.yaml"))
        self.reference_ventures_file = Path(
            os.getenv("REFERENCE_VENTURES_FILE", self.package_root / "data" / "reference_ventures.yaml")
        )

        # AI backend selection: gemini, openai or none
        self.ai_provider = os.getenv("AI_PROVIDER", "gemini").lower()
        self.ai_timeout_seconds = float(os.getenv("AI_TIMEOUT_SECONDS", 30))

        # Google AI settings
        self.gemini_api_key = os.getenv("GEMINI_API_KEY")
        self.gemini_model = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

        # OpenAI settings
        self.openai_api_key = os.getenv("OPENAI_API_KEY")
        self.openai_model = os.getenv("OPENAI_MODEL", "gpt-4o")

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file
                print(f"Loading environment from {env_file}")
            else:
                print(f"Warning: {env_specific_file} not found, falling back to .env")

        # Load the environment file
        load_dotenv(env_file)

# Create a global config instance
config = Config()
