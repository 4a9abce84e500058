from .encoding import decode_share_id, encode_share_id
from .time import normalize_dt, parse_rfc3339, to_rfc3339

__all__ = [
    "encode_share_id",
    "decode_share_id",
    "parse_rfc3339",
    "to_rfc3339",
    "normalize_dt",
]
