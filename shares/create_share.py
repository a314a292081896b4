import logging
from functools import lru_cache

from cors_utils import success_response
from event_utils import http_method, json_body
from share_config import ShareConfig
from share_errors import InternalServerError, MethodNotAllowed, ShareError
from share_store import ShareStore, open_table
from track_validation import validate_tracks

log = logging.getLogger(__name__)
log.setLevel(logging.INFO)


def create_handler(config, table=None):
    """
    Build the CreateShare handler, triggered by POST /shares from API Gateway.

    Expected JSON body:
    {
      "tracks": [
        {"$id": "t1", "trackUrl": "https://.../a.mp3", "trackName": "...", ...},
        ...
      ]
    }

    Responds 201 with {"success": true, "data": {"id": ..., "createdAt": ...}},
    where "id" is the share code clients later hand to GetShare.
    """
    store = ShareStore(table if table is not None else open_table(config))

    def handler(event, context):
        try:
            if http_method(event) != "POST":
                raise MethodNotAllowed()

            tracks = validate_tracks(json_body(event).get("tracks"))
            item = store.create_share(tracks)

            log.info(f"Created share: {item['id']} with {len(tracks)} track(s)")
            return success_response(201, {
                "id": item["id"],
                "createdAt": item["createdAt"],
            })

        except ShareError as e:
            return e.to_response()
        except Exception:
            log.exception("create_share failed")
            return InternalServerError().to_response()

    return handler


@lru_cache(maxsize=None)
def _default_handler():
    return create_handler(ShareConfig.from_env())


def lambda_handler(event, context):
    return _default_handler()(event, context)
