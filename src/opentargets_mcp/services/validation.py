"""
Argument validation for the unified tool.

Narrows the untyped argument bag of each method into its typed model.
Runs before any network access; failures raise InvalidParamsError.
"""

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from opentargets_mcp.constants import ERROR_UNKNOWN_METHOD, Method
from opentargets_mcp.exceptions import InvalidParamsError, UnknownMethodError
from opentargets_mcp.schemas import (
    AssociationQuery,
    DiseaseTargetsSummaryQuery,
    EntityDetailsQuery,
    SearchQuery,
)

logger = logging.getLogger(__name__)

# method -> (argument model, failure message)
_ARGUMENT_MODELS: dict[Method, tuple[type[BaseModel], str]] = {
    Method.SEARCH_TARGETS: (SearchQuery, "Invalid target search arguments"),
    Method.SEARCH_DISEASES: (SearchQuery, "Invalid disease search arguments"),
    Method.GET_TARGET_DISEASE_ASSOCIATIONS: (
        AssociationQuery,
        "Invalid association arguments",
    ),
    Method.GET_DISEASE_TARGETS_SUMMARY: (
        DiseaseTargetsSummaryQuery,
        "Invalid disease targets summary arguments",
    ),
    Method.GET_TARGET_DETAILS: (EntityDetailsQuery, "Target ID is required"),
    Method.GET_DISEASE_DETAILS: (EntityDetailsQuery, "Disease ID is required"),
}

# method -> (identifier field, message reported when it is missing or blank)
_REQUIRED_IDENTIFIERS: dict[Method, tuple[str, str]] = {
    Method.GET_DISEASE_TARGETS_SUMMARY: ("disease_id", "Disease ID is required"),
    Method.GET_TARGET_DETAILS: ("id", "Target ID is required"),
    Method.GET_DISEASE_DETAILS: ("id", "Disease ID is required"),
}


def parse_method(method: Any) -> Method:
    """
    Resolve a method name to its enum member.

    Raises:
        UnknownMethodError: If method is missing or not recognized
    """
    if not isinstance(method, str) or not method:
        raise UnknownMethodError(method, ERROR_UNKNOWN_METHOD)
    try:
        return Method(method)
    except ValueError:
        raise UnknownMethodError(method, ERROR_UNKNOWN_METHOD) from None


def _describe_errors(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into 'field: message' strings."""
    details = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        details.append(f"{field}: {error['msg']}")
    return details


def validate_arguments(method: Method | str, args: dict[str, Any] | None) -> BaseModel:
    """
    Validate arguments for a method.

    Args:
        method: Method enum or name
        args: Flat argument bag from the tool call

    Returns:
        Typed argument model for the method

    Raises:
        UnknownMethodError: If method is not recognized
        InvalidParamsError: If arguments fail shape or range checks
    """
    method = parse_method(method.value if isinstance(method, Method) else method)
    model, message = _ARGUMENT_MODELS[method]

    if not isinstance(args, dict):
        raise InvalidParamsError(message)

    try:
        return model.model_validate(args)
    except ValidationError as e:
        details = _describe_errors(e)
        logger.debug(f"Rejected arguments for {method.value}: {details}")

        identifier = _REQUIRED_IDENTIFIERS.get(method)
        if identifier and any(error["loc"] == (identifier[0],) for error in e.errors()):
            raise InvalidParamsError(identifier[1]) from e
        raise InvalidParamsError(message, details) from e
