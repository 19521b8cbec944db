import json
import os


class ConfigurationError(RuntimeError):
    pass


def service_account():
    """Credential kwargs for boto3.Session, parsed from SERVICE_ACCOUNT."""
    raw = os.environ.get("SERVICE_ACCOUNT")
    if not raw:
        return {}

    try:
        creds = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"SERVICE_ACCOUNT is not valid JSON: {e.msg}") from e

    if not isinstance(creds, dict):
        raise ConfigurationError("SERVICE_ACCOUNT must be a JSON object")

    allowed = ("aws_access_key_id", "aws_secret_access_key", "aws_session_token", "region_name")
    return {key: creds[key] for key in allowed if creds.get(key)}


def user_pool_id():
    pool_id = os.environ.get("USER_POOL_ID")
    if not pool_id:
        raise ConfigurationError("USER_POOL_ID environment variable not set")
    return pool_id


def table_name():
    return os.environ.get("TABLE_NAME", "users")


def log_level():
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return "INFO"
    return level
