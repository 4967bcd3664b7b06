"""
Main application module for the Jeopardy board API.

This module sets up the Flask application, registers the API Blueprint,
and defines the root route and error handlers.

Routes:
- /: Welcome message for the Jeopardy board API.

Error Handlers:
- 404 Not Found: Handles requests for non-existent routes.
- 500 Internal Server Error: Handles internal server errors.
"""

import logging

from flask import Flask
from .blueprints.api.routes import api_bp
from .config import LOG_LEVEL
from .services.utils import create_response


def create_app():
    app = Flask(__name__)
    app.register_blueprint(api_bp, url_prefix="/jeopardy")

    @app.route("/")
    def index():
        return create_response(data={"message": "Welcome to the Jeopardy board API!"})

    @app.errorhandler(404)
    def not_found(error):
        return create_response(error="Not Found", status_code=404)

    @app.errorhandler(500)
    def internal_server_error(error):
        return create_response(error="Internal Server Error", status_code=500)

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app = create_app()
    app.run(debug=True)
