"""Static OpenAPI metadata for the Products API.

Plain dictionaries only: this module is imported from settings, before
Django or DRF are configured.
"""

from typing import Any, Dict

EXAMPLE_TIMESTAMP = "2024-01-15T10:30:00"

API_TITLE = "Products API - Tutorial"
API_VERSION = "2.0"
API_DESCRIPTION = """
**API REST completa para gestión de productos**

### Características principales:
- **CRUD completo** con validaciones robustas
- **Paginación** y filtrado por categoría
- **Manejo de errores** centralizado y consistente
- **DTOs** para separación de responsabilidades
- **Soft delete** para mantener integridad de datos
- **Documentación automática** con ejemplos interactivos

### Cómo usar esta API:
1. **Explorar endpoints** usando la interfaz interactiva
2. **Probar operaciones** con los ejemplos incluidos
3. **Revisar esquemas** de datos en la sección Schemas
4. **Entender errores** con las respuestas de ejemplo
"""

CONTACT = {
    "name": "Sebastián Gómez",
    "email": "sgomez@eafit.edu.co",
    "url": "https://eafit.edu.co",
}
LICENSE = {"name": "MIT License", "url": "https://opensource.org/licenses/MIT"}
SERVERS = [
    {"url": "http://localhost:8000", "description": "Servidor de desarrollo"},
    {"url": "https://api-test.eafit.edu.co", "description": "Servidor de pruebas"},
    {"url": "https://api.eafit.edu.co", "description": "Servidor de producción"},
]

SECURITY_SCHEMES = {
    "BearerAuthentication": {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
        "description": "Ingrese el token JWT en el formato: Bearer {token}",
    },
    "ApiKey": {
        "type": "apiKey",
        "in": "header",
        "name": "X-API-Key",
        "description": "API Key para autenticación de servicios externos",
    },
}


def error_example(
    code: str, message: str, detail: str, status_code: int
) -> Dict[str, Any]:
    """Example payload in the standard error envelope."""
    return {
        "success": False,
        "message": message,
        "timestamp": EXAMPLE_TIMESTAMP,
        "statusCode": status_code,
        "data": {
            "errorCode": code,
            "message": message,
            "details": {"info": detail},
            "timestamp": EXAMPLE_TIMESTAMP,
        },
    }


def validation_error_example() -> Dict[str, Any]:
    message = "Error de validación en los datos enviados"
    return {
        "success": False,
        "message": message,
        "timestamp": EXAMPLE_TIMESTAMP,
        "statusCode": 400,
        "data": {
            "errorCode": "VALIDATION_ERROR",
            "message": message,
            "details": {
                "name": "El nombre del producto es obligatorio",
                "price": "El precio debe ser mayor a 0",
                "category": "La categoría es obligatoria",
            },
            "timestamp": EXAMPLE_TIMESTAMP,
        },
    }


def _json_response(description: str, example: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"example": example}},
    }


# name -> (description, code, message, detail, status)
_ERROR_RESPONSES = {
    "NotFound": (
        "Recurso no encontrado",
        "PRODUCT_NOT_FOUND",
        "Producto no encontrado con ID: 123",
        "El producto solicitado no existe o ha sido eliminado",
        404,
    ),
    "InternalServerError": (
        "Error interno del servidor",
        "INTERNAL_SERVER_ERROR",
        "Ha ocurrido un error interno en el servidor",
        "Error inesperado durante el procesamiento",
        500,
    ),
    "Unauthorized": (
        "No autorizado - Token inválido o expirado",
        "UNAUTHORIZED",
        "Token de acceso inválido o expirado",
        "Proporcione un token válido en el header Authorization",
        401,
    ),
    "Forbidden": (
        "Acceso prohibido - Permisos insuficientes",
        "FORBIDDEN",
        "No tiene permisos para realizar esta operación",
        "Su nivel de acceso no permite esta acción",
        403,
    ),
}


def build_responses() -> Dict[str, Any]:
    responses = {
        name: _json_response(description, error_example(code, msg, detail, status))
        for name, (description, code, msg, detail, status) in _ERROR_RESPONSES.items()
    }
    responses["BadRequest"] = _json_response(
        "Solicitud inválida", validation_error_example()
    )
    return responses


def build_schemas() -> Dict[str, Any]:
    return {
        "ValidationError": {
            "type": "object",
            "description": "Error de validación con detalles específicos por campo",
            "properties": {
                "success": {"type": "boolean", "example": False},
                "message": {"type": "string", "example": "Error de validación"},
                "timestamp": {"type": "string", "format": "date-time"},
                "data": {
                    "type": "object",
                    "description": "Detalles del error por campo",
                },
            },
        },
        "BusinessError": {
            "type": "object",
            "description": "Error de lógica de negocio",
            "properties": {
                "success": {"type": "boolean", "example": False},
                "message": {"type": "string", "example": "Error de negocio"},
                "errorCode": {
                    "type": "string",
                    "example": "BUSINESS_RULE_VIOLATION",
                },
            },
        },
    }


def build_spectacular_settings() -> Dict[str, Any]:
    return {
        "TITLE": API_TITLE,
        "DESCRIPTION": API_DESCRIPTION,
        "VERSION": API_VERSION,
        "CONTACT": CONTACT,
        "LICENSE": LICENSE,
        "SERVERS": SERVERS,
        "SERVE_INCLUDE_SCHEMA": False,
        "COMPONENT_SPLIT_REQUEST": True,
        "SCHEMA_PATH_PREFIX": r"/api",
        "APPEND_COMPONENTS": {
            "securitySchemes": SECURITY_SCHEMES,
            "responses": build_responses(),
            "schemas": build_schemas(),
        },
    }
