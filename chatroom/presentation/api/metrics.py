"""
Prometheus Metrics Endpoint.

    observability/metrics.py  ──►  /metrics (this file)  ──►  Prometheus scraper
"""

from fastapi import APIRouter, Response
from chatroom.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Returns metrics in Prometheus text format."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
