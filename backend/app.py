from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from utils.config import load_config, AIRTABLE_API_URL, AIRTABLE_BASE_ID
from utils.logger import LogBuffer, logs_bp, utc_timestamp
from utils.airtable_client import AirtableClient

# Blueprints
from routes.tables import tables_bp

SERVICE_NAME = 'Airtable Table Creator Agent'

ENDPOINTS = [
    'GET / - This status page',
    'GET /health - Health check',
    'GET /logs - View recent logs',
    'POST /create-table - Create the Tasks table',
    'POST /test - Test run',
]


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.update(load_config() if test_config is None else test_config)
    app.config.setdefault('AIRTABLE_API_URL', AIRTABLE_API_URL)
    app.config.setdefault('CORS_ORIGINS', ['*'])

    CORS(app, resources={r"/*": {"origins": app.config['CORS_ORIGINS']}})

    log_buffer = LogBuffer()
    app.extensions['log_buffer'] = log_buffer
    app.extensions['airtable_client'] = AirtableClient(
        app.config.get('AIRTABLE_PAT'),
        base_id=AIRTABLE_BASE_ID,
        api_url=app.config['AIRTABLE_API_URL'],
    )
    if not app.config.get('AIRTABLE_PAT'):
        log_buffer.add_log('Warning: AIRTABLE_PAT is not set; Airtable requests will fail')

    # Status page
    @app.get("/")
    def index():
        return jsonify({"status": SERVICE_NAME, "endpoints": ENDPOINTS})

    # Health
    @app.get("/health")
    def health():
        return jsonify({"status": "healthy", "timestamp": utc_timestamp()})

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return jsonify({"success": False, "error": "Method not allowed"}), 405

    @app.errorhandler(Exception)
    def unhandled(e):
        if isinstance(e, HTTPException):
            return jsonify({"success": False, "error": e.description}), e.code
        log_buffer.add_log(f"Unhandled error: {e!r}")
        return jsonify({"success": False, "error": "Internal server error"}), 500

    # Register blueprints
    app.register_blueprint(logs_bp)
    app.register_blueprint(tables_bp)

    return app


def main():
    app = create_app()
    port = app.config['PORT']
    app.extensions['log_buffer'].add_log(f"Table Creator Agent running on port {port}")
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
