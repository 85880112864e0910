import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_FILE = Path(os.getenv("MOCK_DATA_FILE", "./data.json"))
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    CORS_ALLOW_METHODS = ["DELETE", "POST", "PUT", "PATCH"]
    CORS_ALLOW_HEADERS = ["Content-Type"]


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
