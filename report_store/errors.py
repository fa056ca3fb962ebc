"""Ошибки хранилища отчетов.

Каждая ошибка несет стабильный код и HTTP-статус, которые обработчики
отдают клиенту. Трассировка стека клиенту не передается, только в лог.
"""


class ReportStoreError(Exception):
    code = "report_store_error"
    status_code = 500
    default_message = "Report store error"

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        body = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


class StoreUnavailable(ReportStoreError):
    """Папка с отчетами отсутствует или недоступна для чтения."""
    code = "store_unavailable"
    default_message = "Reports folder not found"


class DecodeFailure(ReportStoreError):
    """pdfData не является корректным data-URL с base64."""
    code = "decode_failure"
    default_message = "Failed to decode report payload"


class IOFailure(ReportStoreError):
    code = "io_failure"
    default_message = "Report storage I/O failed"


class NotFound(ReportStoreError):
    code = "not_found"
    status_code = 404
    default_message = "File not found"


class InvalidFileName(ReportStoreError):
    """Имя файла пустое, служебное или содержит разделители пути."""
    code = "invalid_filename"
    status_code = 400
    default_message = "Invalid file name"
