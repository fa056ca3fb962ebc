import logging
import sys

from flask import Flask, jsonify, request
from flask_cors import CORS

from .config import load_config
from .handlers_report import ReportHandler
from .middleware_auth import BearerTokenMiddleware
from .services_report import ReportService
from .storage_fs import FileSystemStorage

logger = logging.getLogger(__name__)


def configure_logging(logging_config):
    logging.basicConfig(
        level=getattr(logging, logging_config.level, logging.INFO),
        format=logging_config.format,
        stream=sys.stdout
    )


def create_app(config=None):
    if config is None:
        config = load_config()
    configure_logging(config.logging)

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = config.server.max_content_length
    app.config['REPORT_STORE'] = config
    CORS(app, origins=config.server.cors_origins)

    # Папка с отчетами создается один раз при старте, а не в обработчиках
    storage = FileSystemStorage(config.storage.reports_folder)
    storage.ensure_root()
    logger.info(f"Reports folder location: {storage.root}")

    report_service = ReportService(storage)
    report_handler = ReportHandler(report_service)
    auth_middleware = BearerTokenMiddleware()

    @app.before_request
    def log_request_info():
        # Тело запроса не логируем: в нем целый PDF
        logger.debug(f"Request: {request.method} {request.path}")

    @app.after_request
    def log_response_info(response):
        logger.debug(f"Response: {response.status_code}")
        return response

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({"error": "Payload too large", "code": "payload_too_large"}), 413

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            "status": "ok",
            "reportsFolder": str(storage.root),
            "reportsFolderExists": storage.root_exists(),
        }), 200

    @app.route('/api/reports', methods=['GET'])
    @auth_middleware.carry_token
    def get_reports():
        logger.info("GET /api/reports called")
        return report_handler.get_reports()

    @app.route('/api/reports', methods=['POST'])
    @auth_middleware.carry_token
    def save_report():
        logger.info("POST /api/reports called")
        return report_handler.save_report()

    # path: имя с закодированным '/' доходит до проверки имени файла
    @app.route('/api/reports/<path:filename>', methods=['GET'])
    @auth_middleware.carry_token
    def serve_report(filename):
        return report_handler.serve_report(filename)

    return app


def main():
    config = load_config()
    app = create_app(config)
    logger.info(f"Server running at http://{config.server.host}:{config.server.port}")
    app.run(host=config.server.host, port=config.server.port, debug=config.server.debug)


if __name__ == '__main__':
    main()
