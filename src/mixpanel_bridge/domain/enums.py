"""Enumerations shared by the dispatch boundary and the clients."""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    """Operation names understood by the transport collaborator."""

    GET_INSTANCE = "getInstance"
    FLUSH = "flush"
    TRACK = "track"
    GET_DEVICE_INFO = "getDeviceInfo"
    GET_DISTINCT_ID = "getDistinctId"
    IDENTIFY = "identify"
    OPT_IN_TRACKING = "optInTracking"
    OPT_OUT_TRACKING = "optOutTracking"
    RESET = "reset"


class ConsentState(StrEnum):
    """Whether events are currently recorded and sent."""

    OPTED_IN = "optedIn"
    OPTED_OUT = "optedOut"
