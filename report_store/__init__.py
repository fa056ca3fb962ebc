"""Хранилище ежедневных PDF-отчетов поверх обычной папки."""

from .app import create_app

__all__ = ["create_app"]
