from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    ENV: str = "local"  # "local" or "prod"
    LOG_LEVEL: str = "INFO"

    # Counselor conversation corpus used by the chat responder
    TRAINING_DATA_PATH: str = "data/train-00000-of-00001.csv"

    # Pre-assessment analysis
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4-turbo"

    # Background jobs
    ENABLE_SCHEDULER: bool = True
    SESSION_ARCHIVE_AFTER_DAYS: int = 30

    class Config:
        env_file = ".env"

settings = Settings()
