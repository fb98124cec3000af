"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "sort",
                "message": "Must be one of ['age', 'id', 'team_name', 'username']",
                "code": "INVALID_SORT_FIELD",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Member with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field details:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "delta",
                        "message": "Must not be zero",
                        "code": "INVALID_VALUE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Member with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "delta",
                            "message": "Must not be zero",
                            "code": "INVALID_VALUE",
                        }
                    ],
                },
            ]
        }
    )
