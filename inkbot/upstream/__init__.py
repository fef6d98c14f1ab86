"""Upstream module -- hour-bucketed caching of splatoon3.ink documents."""

from inkbot.upstream.cache import TimeBucketedCache
from inkbot.upstream.resources import UpstreamData, UpstreamResource

__all__ = [
    "TimeBucketedCache",
    "UpstreamData",
    "UpstreamResource",
]
