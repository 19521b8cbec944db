import json

from botocore.exceptions import ClientError


def json_response(status_code, payload):
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def text_response(status_code, text):
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/plain"},
        "body": text,
    }


def error_message(exc):
    if isinstance(exc, ClientError):
        message = exc.response.get("Error", {}).get("Message")
        if message:
            return message
    return str(exc) or type(exc).__name__
