"""Normalized error types surfaced by the gateway.

Every failure that leaves a gateway operation is one of these. They are only
constructed by the error classifier and the client provider.
"""
from __future__ import annotations

CONFIGURATION_ERROR_PREFIX = "Error de Configuración"
CONFIGURATION_ERROR_MESSAGE = (
    f"{CONFIGURATION_ERROR_PREFIX}: La API Key para el servicio de IA no ha sido "
    "configurada. El administrador del sitio debe añadirla en los ajustes de "
    "despliegue para que la aplicación funcione."
)


class GatewayError(Exception):
    """Base exception for normalized gateway failures."""


class ConfigurationError(GatewayError):
    """The service credential is missing or was rejected.

    The message is fixed and meant to be shown to an operator as-is.
    """

    def __init__(self, message: str = CONFIGURATION_ERROR_MESSAGE):
        super().__init__(message)


class ApiKeyError(ConfigurationError):
    """The remote service reported the configured credential as invalid."""


class GenericFailure(GatewayError):
    """A remote call or response decode failed for a known operation."""

    def __init__(self, context: str, original_message: str):
        self.context = context
        self.original_message = original_message
        super().__init__(f"Failed to {context}. {original_message}")


class UnknownFailure(GatewayError):
    """Something without any message was raised while running an operation."""

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"An unknown error occurred while trying to {context}.")


def is_configuration_error(error: BaseException) -> bool:
    """Check whether ``error`` already is a configuration error."""
    return isinstance(error, ConfigurationError) or str(error).startswith(
        CONFIGURATION_ERROR_PREFIX
    )
