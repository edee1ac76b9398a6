from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import SourceUnavailable, ValidationError

logger = logging.getLogger(__name__)


def json_errors(view):
    """Map domain errors onto JSON responses for async Flask views."""

    @wraps(view)
    async def wrapper(*args, **kwargs):
        try:
            return await view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except SourceUnavailable as e:
            logger.warning("Source unavailable: %s", e)
            return jsonify({"success": False, "message": "Couldn't load data. Please retry."}), 503

    return wrapper
