import base64
import json
import logging

import accounts
import config
import profiles
from responses import error_message, json_response, text_response

logger = logging.getLogger()
logger.setLevel(config.log_level())


def _method(event):
    method = event.get("httpMethod")
    if method is None:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method") or ""
    return method.upper()


def _parse_body(event):
    raw = event.get("body") or ""
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")

    body = json.loads(raw)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def _display_name(registration):
    first = registration.get("firstName") or ""
    last = registration.get("lastName") or ""
    return f"{first} {last}".strip()


def lambda_handler(event, context):
    method = _method(event)
    if method != "POST":
        logger.info("Rejected %s request", method or "unknown")
        return text_response(405, "Method Not Allowed")

    uid = None
    try:
        registration = _parse_body(event)
        email = registration.get("email")
        password = registration.get("password")
        if not email or not password:
            raise ValueError("email and password are required")

        uid = accounts.create_account(email, password, _display_name(registration))
        profiles.write_profile(uid, registration)

        return json_response(200, {"success": True, "uid": uid})
    except Exception as e:
        logger.error("User creation failed: %s", error_message(e))
        if uid is not None:
            _rollback_account(uid, email)
        return json_response(400, {"success": False, "error": error_message(e)})


def _rollback_account(uid, email):
    try:
        accounts.delete_account(email)
        logger.warning("Deleted account %s after profile write failure", uid)
    except Exception:
        logger.exception("Could not delete orphaned account %s", uid)
