import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()

DEFAULT_REPORTS_FOLDER = "Dailyrepport"
DEFAULT_PORT = 3001
DEFAULT_MAX_UPLOAD_MB = 50

@dataclass
class StorageConfig:
    reports_folder: str

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    debug: bool = False
    max_content_length: int = DEFAULT_MAX_UPLOAD_MB * 1024 * 1024
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

@dataclass
class Config:
    storage: StorageConfig
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

def _env_bool(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")

def load_config():
    # Папка с отчетами задается относительно рабочей директории процесса
    reports_folder = os.path.abspath(os.getenv("REPORTS_FOLDER", DEFAULT_REPORTS_FOLDER))
    return Config(
        storage=StorageConfig(
            reports_folder=reports_folder,
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            debug=_env_bool("FLASK_DEBUG"),
            max_content_length=int(os.getenv("MAX_UPLOAD_MB", str(DEFAULT_MAX_UPLOAD_MB))) * 1024 * 1024,
            cors_origins=[o for o in os.getenv("CORS_ORIGINS", "*").split("|") if o],
        ),
        logging=LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
        ),
    )
