"""Prometheus metrics for cascade resolution.

Labels are limited to resolver and source names; keys are never used as
labels since their cardinality is unbounded. Unnamed chains share the
"anonymous" resolver label.
"""

from prometheus_client import Counter, Histogram

SOURCE_QUERIES = Counter(
    "cascade_source_queries_total",
    "Total number of source queries made during resolution",
    labelnames=["source"],
)

RESOLUTIONS = Counter(
    "cascade_resolutions_total",
    "Total number of key resolutions",
    labelnames=["resolver", "outcome"],
)

RESOLUTION_LATENCY = Histogram(
    "cascade_resolution_latency_seconds",
    "Latency of a single key resolution in seconds",
    labelnames=["resolver"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

SOURCE_CACHE_HITS = Counter(
    "cascade_source_cache_hits_total",
    "Total number of cache hits in cached sources",
    labelnames=["source"],
)

SOURCE_CACHE_MISSES = Counter(
    "cascade_source_cache_misses_total",
    "Total number of cache misses in cached sources",
    labelnames=["source"],
)
