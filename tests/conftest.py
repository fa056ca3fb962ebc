"""Общие фикстуры для тестов хранилища отчетов."""

import base64
import os

import pytest

from report_store.app import create_app
from report_store.config import Config, LoggingConfig, ServerConfig, StorageConfig

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n%%EOF\n"


def to_data_url(content: bytes) -> str:
    return "data:application/pdf;base64," + base64.b64encode(content).decode("ascii")


def put_file(folder, name, content=PDF_BYTES, mtime=None):
    """Кладет файл в папку отчетов и при необходимости выставляет mtime."""
    path = folder / name
    path.write_bytes(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def reports_dir(tmp_path):
    return tmp_path / "Dailyrepport"


@pytest.fixture
def config(reports_dir):
    return Config(
        storage=StorageConfig(reports_folder=str(reports_dir)),
        server=ServerConfig(),
        logging=LoggingConfig(level="DEBUG"),
    )


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
