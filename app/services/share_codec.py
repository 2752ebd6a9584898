"""
ShareCodec - trip <-> portable token.

Token layout: base64(utf8(json(trip))). The UTF-8 step makes any member
name or description (Vietnamese included) a plain byte stream before the
base64 step, and the standard base64 alphabet (A-Z a-z 0-9 + / =) is legal
in a URL fragment as is. Tokens are interchangeable with share links made
by the browser client.

This is a portability format, not a protection mechanism.
"""

import base64
import binascii
import logging
from typing import Optional

from pydantic import ValidationError

from app.models.trip import Trip

logger = logging.getLogger(__name__)


class ShareCodec:
    @staticmethod
    def encode(trip: Trip) -> str:
        """Serialize a trip into a portable token. Never truncates."""
        text = trip.model_dump_json(by_alias=True, exclude_none=True)
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    @staticmethod
    def decode(token: str) -> Optional[Trip]:
        """
        Rebuild a trip from a token.

        Returns None when the token is not base64, the payload is not UTF-8
        JSON, or the JSON is not a trip with an id. Callers must leave their
        state untouched in that case.
        """
        try:
            raw = base64.b64decode(token, validate=True)
            text = raw.decode("utf-8")
            return Trip.model_validate_json(text)
        except (binascii.Error, UnicodeDecodeError, ValueError, TypeError) as exc:
            # ValidationError is a ValueError; kept explicit for the log line
            kind = "invalid trip" if isinstance(exc, ValidationError) else "malformed token"
            logger.warning("Failed to decode share token (%s): %s", kind, exc)
            return None
