"""OpenTelemetry instrumentation configuration."""

from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBasedTraceIdRatio

from petclinic.infrastructure.config import Settings


def configure_opentelemetry(settings: Settings, service: str) -> None:
    """Configure OpenTelemetry tracing for one of the petclinic services.

    Outgoing httpx calls to the customers and visits services carry W3C
    trace context once the httpx instrumentor is active.
    """
    if not settings.otel_enabled:
        return

    resource = Resource.create(
        {
            "service.name": f"{settings.otel_service_name}-{service}",
            "service.version": settings.app_version,
            "deployment.environment": settings.app_env,
        }
    )

    trace_provider = TracerProvider(
        resource=resource,
        sampler=ParentBasedTraceIdRatio(settings.otel_trace_sample_rate),
    )
    otlp_exporter = OTLPSpanExporter(
        endpoint=settings.otel_exporter_otlp_endpoint,
        insecure=settings.otel_exporter_otlp_insecure,
    )
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
    trace.set_tracer_provider(trace_provider)

    LoggingInstrumentor().instrument(set_logging_format=True)
    HTTPXClientInstrumentor().instrument()


def instrument_fastapi(app: Any) -> None:
    """Instrument FastAPI application with OpenTelemetry."""
    FastAPIInstrumentor.instrument_app(app)


def instrument_sqlalchemy(engine: Any) -> None:
    """Instrument SQLAlchemy engine with OpenTelemetry."""
    SQLAlchemyInstrumentor().instrument(
        engine=engine.sync_engine,
        enable_commenter=True,
        commenter_options={"db_framework": True, "opentelemetry_values": True},
    )


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer instance."""
    return trace.get_tracer(name)
