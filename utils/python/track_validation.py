from share_errors import BadRequest

REQUIRED_TRACK_FIELDS = ("$id", "trackUrl")
ALLOWED_TRACK_FIELDS = frozenset([
    "$id", "trackName", "authorName", "authorUrl", "trackUrl",
    "thumbnail", "licenseName", "licenseUrl", "volume",
    "isPublic", "fileId", "category", "isPremiumOnly", "moods",
    "tags",
])


def is_missing(value):
    """JSON-falsy: absent, null, false, "", 0 or NaN. Empty lists and objects are present."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def validate_tracks(tracks):
    """
    Check the submitted tracks list and return it unchanged.

    Raises BadRequest for the first problem found; later tracks are not looked at.
    """
    if not isinstance(tracks, list) or not tracks:
        raise BadRequest("Missing or invalid parameter: tracks must be a non-empty array")

    for i, track in enumerate(tracks):
        validate_track(i, track)

    return tracks


def validate_track(index, track):
    # A JSON array is not a track
    if not isinstance(track, dict):
        raise BadRequest(f"Track at index {index} must be an object")

    for field in REQUIRED_TRACK_FIELDS:
        if is_missing(track.get(field)):
            raise BadRequest(f"Track at index {index} is missing required field: {field}")

    unknown_fields = [k for k in track if k not in ALLOWED_TRACK_FIELDS]
    if unknown_fields:
        raise BadRequest(f"Track at index {index} contains unknown fields: {', '.join(unknown_fields)}")
