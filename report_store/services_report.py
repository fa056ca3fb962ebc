import base64
import binascii
import logging

from .errors import DecodeFailure
from .models_report import Report, sort_reports

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


def decode_data_url(pdf_data):
    """Декодирует data-URL вида '<префикс>,<base64>' в байты."""
    if not isinstance(pdf_data, str) or "," not in pdf_data:
        raise DecodeFailure(details="pdfData must be a data URL '<prefix>,<base64 data>'")
    _, encoded = pdf_data.split(",", 1)
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeFailure(details=f"Invalid base64 data: {e}") from e


class ReportService:
    def __init__(self, storage):
        self.storage = storage

    def list_reports(self):
        names = self.storage.list_names()
        logger.debug(f"Files found in reports folder: {names}")

        reports = []
        for name in names:
            if not name.endswith(PDF_SUFFIX):
                logger.debug(f"Skipping non-PDF file: {name}")
                continue
            path = self.storage.entry_path(name)
            report = Report.from_file(
                file_name=name,
                file_path=str(path),
                last_modified=self.storage.stat_mtime(path),
            )
            logger.debug(f"Processing file: {name} date={report.date!r}")
            reports.append(report)

        return sort_reports(reports)

    def upload_report(self, file_name, pdf_data):
        # Проверяем имя и декодируем до обращения к диску
        self.storage.resolve(file_name)
        content = decode_data_url(pdf_data)
        path = self.storage.write_atomic(file_name, content)
        logger.info(f"Saved report to: {path} ({len(content)} bytes)")
        return path

    def get_report_path(self, file_name):
        return self.storage.open_path(file_name)
