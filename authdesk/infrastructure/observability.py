# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, g, request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "authdesk_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
REQUEST_COUNTER = Counter(
    "authdesk_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)


def _endpoint() -> str:
    # route template keeps label cardinality bounded
    rule = request.url_rule
    return rule.rule if rule is not None else "unmatched"


def configure_metrics(app: Flask, *, enabled: bool = True) -> None:
    if not enabled:
        return

    @app.before_request
    def _start_timer() -> None:
        g.metrics_start_time = time.perf_counter()

    @app.after_request
    def _record(response: Response) -> Response:
        start = getattr(g, "metrics_start_time", None)
        endpoint = _endpoint()
        if start is not None:
            REQUEST_LATENCY.labels(endpoint=endpoint).observe(time.perf_counter() - start)
        REQUEST_COUNTER.labels(endpoint=endpoint, status=str(response.status_code)).inc()
        return response


def render_metrics() -> Response:
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


__all__ = [
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "configure_metrics",
    "render_metrics",
]
