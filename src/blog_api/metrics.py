"""Shared OTel metrics instruments for the service."""

from opentelemetry import metrics

METER_NAME = "blog_api"

meter = metrics.get_meter(METER_NAME)

posts_created_total = meter.create_counter(
    name="posts_created_total",
    description="Total posts created",
    unit="1",
)

posts_deleted_total = meter.create_counter(
    name="posts_deleted_total",
    description="Total posts deleted",
    unit="1",
)
