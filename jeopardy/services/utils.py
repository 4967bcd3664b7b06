"""
Utility functions for the Jeopardy board API.

Functions:
- parse_and_validate_request(required_fields): Parses and validates the request JSON payload.
- create_response(data, error, status_code): Creates a JSON response with the provided data or error message.
"""
from flask import request, jsonify


def parse_and_validate_request(required_fields):
    """
    Parses the request JSON payload and validates the presence of required fields.

    :param required_fields: A list of strings representing required field names.
    :return: A tuple of (data, error). If successful, data contains the parsed JSON
             and error is None. On failure, data is None and error contains an error message.
    """
    data = request.get_json(force=True, silent=True)
    if not data:
        return None, "Request payload is empty or not valid JSON"
    if not isinstance(data, dict):
        return None, "Request payload must be a JSON object"

    missing_fields = [field for field in required_fields if field not in data]
    if missing_fields:
        return None, f"Missing required fields: {', '.join(missing_fields)}"

    return data, None


def create_response(data=None, error=None, status_code=200):
    """
    Creates a JSON response with the provided data or error message.

    :param data: The data to include in the response, if any.
    :param error: The error message to include in the response, if any.
    :param status_code: The HTTP status code for the response (default: 200).
    :return: A JSON response with the provided data or error message.
    """
    response = {}
    if data is not None:
        response["data"] = data
    if error is not None:
        response["error"] = error
    return jsonify(response), status_code
