import json
import logging
from functools import lru_cache

from cors_utils import success_response
from event_utils import header, http_method, json_body
from share_config import ShareConfig, StoreCredentials
from share_errors import BadRequest, CorruptedShare, InternalServerError, MethodNotAllowed, NotFound, ShareError
from share_store import ShareStore, open_table

log = logging.getLogger(__name__)
log.setLevel(logging.INFO)


def forwarded_credentials(event):
    """Credentials the caller forwarded with the request, if any."""
    access_key_id = header(event, "X-Share-Access-Key-Id")
    secret_access_key = header(event, "X-Share-Secret-Access-Key")
    if not access_key_id or not secret_access_key:
        return None
    return StoreCredentials(access_key_id, secret_access_key, header(event, "X-Share-Session-Token"))


def create_handler(config, table=None, table_factory=open_table):
    """
    Build the GetShare handler, triggered by POST /shares/lookup.

    Expected JSON body: {"code": "<share id>"}

    When the request forwards its own store credentials, the table is opened
    with those for this request only; otherwise `table` (or one opened from
    `config`) is used.
    """
    default_store = ShareStore(table if table is not None else table_factory(config))

    def store_for(event):
        credentials = forwarded_credentials(event)
        if credentials is None:
            return default_store
        return ShareStore(table_factory(config, credentials))

    def handler(event, context):
        try:
            if http_method(event) != "POST":
                raise MethodNotAllowed()

            code = json_body(event).get("code")
            if not isinstance(code, str) or not code.strip():
                raise BadRequest("Missing or invalid required parameter: code")

            shares = store_for(event).find_shares(code.strip())
            if not shares:
                raise NotFound(f"Share with code '{code}' does not exist")

            # ids are unique, so there is at most one
            share = shares[0]

            try:
                tracks = json.loads(share["tracks"])
                if not isinstance(tracks, list):
                    raise ValueError(f"tracks is a {type(tracks).__name__}, not a list")
            except (KeyError, TypeError, ValueError) as e:
                log.error(f"Failed to parse tracks for share: {share.get('id')}")
                raise CorruptedShare(original_exception=e) from e

            log.info(f"Fetched share: {share['id']} with {len(tracks)} track(s)")
            return success_response(200, {
                "id": share["id"],
                "tracks": tracks,
            })

        except ShareError as e:
            return e.to_response()
        except Exception:
            log.exception("get_share failed")
            return InternalServerError().to_response()

    return handler


@lru_cache(maxsize=None)
def _default_handler():
    return create_handler(ShareConfig.from_env())


def lambda_handler(event, context):
    return _default_handler()(event, context)
