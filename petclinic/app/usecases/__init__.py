"""Application use cases."""

from petclinic.app.usecases.gateway_usecases import GetOwnerDetailsUseCase
from petclinic.app.usecases.owner_usecases import (
    CreateOwnerUseCase,
    GetOwnerUseCase,
    ListOwnersUseCase,
    UpdateOwnerUseCase,
)
from petclinic.app.usecases.recording_usecases import RecordingService


__all__ = [
    "CreateOwnerUseCase",
    "GetOwnerDetailsUseCase",
    "GetOwnerUseCase",
    "ListOwnersUseCase",
    "RecordingService",
    "UpdateOwnerUseCase",
]
