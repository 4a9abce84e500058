from __future__ import annotations

import base64


def encode_share_id(public_url: str) -> str:
    """
    Encode a public share URL for the `/shares/u!{id}` endpoint.

    Plain base64 (standard alphabet) of the UTF-8 bytes, with the trailing
    '=' padding removed. The result is not percent-encoded.
    """
    encoded = base64.b64encode(public_url.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def decode_share_id(share_id: str) -> str:
    """Inverse of encode_share_id (padding is restored before decoding)."""
    padded = share_id + "=" * (-len(share_id) % 4)
    return base64.b64decode(padded).decode("utf-8")
