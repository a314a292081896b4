import json
import logging
import uuid
from datetime import datetime, timezone

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from share_errors import Forbidden, InternalServerError, Unauthorized

log = logging.getLogger(__name__)
log.setLevel(logging.INFO)

# DynamoDB reports most credential problems as 400s, so the error code matters as much as the status
AUTH_ERROR_CODES = {
    "UnrecognizedClientException",
    "InvalidSignatureException",
    "MissingAuthenticationTokenException",
    "ExpiredTokenException",
    "InvalidClientTokenId",
}
PERMISSION_ERROR_CODES = {"AccessDeniedException", "AccessDenied"}


def open_table(config, credentials=None):
    """Build a Table resource for the shares table; explicit credentials win over config ones."""
    credentials = credentials or config.credentials
    session = boto3.session.Session(**(credentials.as_boto_kwargs() if credentials else {}))
    dynamodb = session.resource(
        "dynamodb",
        region_name=config.region_name,
        endpoint_url=config.endpoint_url,
    )
    return dynamodb.Table(config.table_name)


def store_status(exc):
    """The numeric status the store reported for a failed call, or None."""
    if isinstance(exc, NoCredentialsError):
        return 401
    if not isinstance(exc, ClientError):
        return None

    error = exc.response.get("Error", {})
    code = str(error.get("Code", ""))
    if code in AUTH_ERROR_CODES:
        return 401
    if code in PERMISSION_ERROR_CODES:
        return 403
    if code.isdigit():
        return int(code)
    return exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")


def classify_store_error(exc):
    """Map a failed store call onto the handler error taxonomy."""
    status = store_status(exc)
    if status == 401:
        log.error(f"Auth error: {exc}")
        return Unauthorized(original_exception=exc)
    if status == 403:
        log.error(f"Permission error: {exc}")
        return Forbidden(original_exception=exc)

    log.error(f"Unhandled database error: {exc}")
    return InternalServerError(original_exception=exc)


class ShareStore:
    """The two table operations the handlers need: create one share, find shares by id."""

    def __init__(self, table):
        self.table = table

    def create_share(self, tracks):
        item = {
            "id": str(uuid.uuid4()),
            "createdAt": datetime.now(timezone.utc).isoformat(),
            "tracks": json.dumps(tracks, allow_nan=False),
        }
        try:
            self.table.put_item(
                Item=item,
                ConditionExpression=Attr("id").not_exists(),
            )
        except (ClientError, BotoCoreError) as e:
            raise classify_store_error(e) from e
        return item

    def find_shares(self, share_id):
        try:
            resp = self.table.query(KeyConditionExpression=Key("id").eq(share_id))
        except (ClientError, BotoCoreError) as e:
            raise classify_store_error(e) from e
        return resp.get("Items", [])
