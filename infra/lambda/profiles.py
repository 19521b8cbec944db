import logging
from datetime import datetime, timezone

import clients

logger = logging.getLogger()


def build_profile(uid, registration, now):
    category = registration.get("category")
    return {
        "uid": uid,
        "email": registration.get("email"),
        "firstName": registration.get("firstName"),
        "lastName": registration.get("lastName"),
        # stored as NULL when omitted
        "phone": registration.get("phone") or None,
        "category": category,
        "role": category,
        "createdAt": now,
        "updatedAt": now,
    }


def write_profile(uid, registration):
    now = datetime.now(timezone.utc).isoformat()
    item = build_profile(uid, registration, now)

    # put_item replaces any existing item with the same key
    clients.table().put_item(Item=item)
    logger.info("Wrote profile %s", uid)
    return item
