"""
Facade factory for payload-driven facade creation.

Usage:
    from event_facade.factory import create_facade

    facade = create_facade({"type": "track", "event": "Signed Up"})
    facade.event()  # "Signed Up"
"""

import logging
from typing import Any, Dict, Mapping, Optional, Type, Union

from event_facade.accessor import FacadeOptions
from event_facade.errors import UnsupportedFacadeError
from event_facade.identify import Identify
from event_facade.track import Track

logger = logging.getLogger(__name__)

Facade = Union[Identify, Track]

FACADES: Dict[str, Type[Facade]] = {
    "identify": Identify,
    "track": Track,
}


def create_facade(
    dictionary: Mapping[str, Any],
    options: Optional[FacadeOptions] = None,
) -> Facade:
    """
    Create the facade matching a payload's `type`.

    Payloads without a `type` are treated as track events when they carry
    an `event` name and as identify calls otherwise.

    Args:
        dictionary: Raw event payload
        options: Facade options, defaults to library settings

    Returns:
        An Identify or Track facade wrapping ``dictionary``

    Raises:
        UnsupportedFacadeError: If `type` names an unknown facade
    """
    declared = dictionary.get("type")
    if declared is None:
        facade_type = "track" if dictionary.get("event") is not None else "identify"
    else:
        facade_type = str(declared).strip().lower()

    facade_cls = FACADES.get(facade_type)
    if facade_cls is None:
        raise UnsupportedFacadeError(str(declared))

    logger.debug("Creating facade", extra={"facade": facade_type})
    return facade_cls(dictionary, options)
