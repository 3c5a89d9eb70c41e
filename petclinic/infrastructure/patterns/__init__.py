"""Microservice patterns (circuit breaker)."""

from petclinic.infrastructure.patterns.circuit_breaker import CircuitBreakerService


__all__ = ["CircuitBreakerService"]
