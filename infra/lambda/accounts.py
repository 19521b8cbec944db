import logging

from botocore.exceptions import BotoCoreError, ClientError

import clients
import config

logger = logging.getLogger()


def _attribute(user, name):
    for attr in user.get("Attributes", []):
        if attr["Name"] == name:
            return attr["Value"]
    return None


def _discard_user(cognito, pool_id, email):
    try:
        cognito.admin_delete_user(UserPoolId=pool_id, Username=email)
    except Exception:
        logger.exception("Could not delete half-created account %s", email)


def create_account(email, password, display_name):
    """Create a confirmed Cognito user and return its ``sub``.

    The password is set as permanent so the user can sign in with it
    straight away; Cognito rejections surface as ``ClientError``.
    """
    cognito = clients.cognito()
    pool_id = config.user_pool_id()

    attributes = [
        {"Name": "email", "Value": email},
        {"Name": "email_verified", "Value": "true"},
    ]
    if display_name:
        attributes.append({"Name": "name", "Value": display_name})

    response = cognito.admin_create_user(
        UserPoolId=pool_id,
        Username=email,
        TemporaryPassword=password,
        UserAttributes=attributes,
        MessageAction="SUPPRESS",
    )
    try:
        cognito.admin_set_user_password(
            UserPoolId=pool_id,
            Username=email,
            Password=password,
            Permanent=True,
        )
    except (ClientError, BotoCoreError):
        # a user left without a permanent password cannot sign in
        _discard_user(cognito, pool_id, email)
        raise

    uid = _attribute(response["User"], "sub") or response["User"]["Username"]
    logger.info("Created account %s", uid)
    return uid


def delete_account(email):
    clients.cognito().admin_delete_user(UserPoolId=config.user_pool_id(), Username=email)
