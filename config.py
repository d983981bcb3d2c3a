import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("BOOKLOG_APP_NAME", "Book Log")

    # Database: the books table lives in this SQLite file
    db_file: str = os.getenv("BOOKLOG_DB_FILE", "books.db")

    # Logging (DEBUG, INFO, WARNING, ERROR)
    log_level: str = os.getenv("BOOKLOG_LOG_LEVEL", "WARNING").upper()


settings = Settings()
