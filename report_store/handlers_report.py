import logging

from flask import g, jsonify, request, send_file

from .errors import ReportStoreError

logger = logging.getLogger(__name__)


def log_store_error(error: ReportStoreError, action):
    if error.status_code < 500:
        logger.warning(f"{action}: {error.message} ({error.details})")
    else:
        logger.exception(f"{action}: {error.message}")


def error_response(error: ReportStoreError):
    return jsonify(error.to_dict()), error.status_code


def internal_error_response(message):
    return jsonify({"error": message, "code": "internal_error"}), 500


class ReportHandler:
    def __init__(self, report_service):
        self.report_service = report_service

    def get_reports(self):
        try:
            reports = self.report_service.list_reports()
        except ReportStoreError as e:
            log_store_error(e, "Error reading reports")
            return error_response(e)
        except Exception:
            logger.exception("Unexpected error reading reports")
            return internal_error_response("Failed to read reports")

        logger.info(f"Sending {len(reports)} reports")
        return jsonify([report.to_dict() for report in reports]), 200

    def save_report(self):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({"error": "Request body must be a JSON object", "code": "invalid_request"}), 400

        file_name = body.get("fileName")
        pdf_data = body.get("pdfData")
        if not isinstance(file_name, str) or not isinstance(pdf_data, str):
            return jsonify({
                "error": "fileName and pdfData must be strings",
                "code": "invalid_request",
            }), 400

        logger.info(f"Saving report {file_name!r} (subject={getattr(g, 'token_subject', None)})")
        try:
            path = self.report_service.upload_report(file_name, pdf_data)
        except ReportStoreError as e:
            log_store_error(e, f"Error saving report {file_name!r}")
            return error_response(e)
        except Exception:
            logger.exception(f"Unexpected error saving report {file_name!r}")
            return internal_error_response("Failed to save report")

        return jsonify({"success": True, "filePath": str(path)}), 200

    def serve_report(self, filename):
        try:
            path = self.report_service.get_report_path(filename)
        except ReportStoreError as e:
            log_store_error(e, f"Error serving file {filename!r}")
            return error_response(e)
        except Exception:
            logger.exception(f"Unexpected error serving file {filename!r}")
            return internal_error_response("Failed to serve file")

        logger.info(f"Serving file: {path}")
        try:
            return send_file(path, mimetype="application/pdf", download_name=filename)
        except OSError:
            logger.exception(f"Error reading file {filename!r}")
            return internal_error_response("Failed to serve file")
