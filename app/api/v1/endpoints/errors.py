from fastapi import HTTPException, status

from app.services.share_service import ShareDecodeError, ShareLinkTooLongError
from app.services.trip_service import BlankNameError, ReadOnlyTripError, TripNotFoundError
from app.utils.expense_validation import ExpenseValidationError


def to_http_exception(exc: Exception) -> HTTPException:
    """Map a domain error to the HTTP error shown to the client."""
    if isinstance(exc, TripNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ReadOnlyTripError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, ShareLinkTooLongError):
        return HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(exc))
    if isinstance(exc, (ExpenseValidationError, BlankNameError, ShareDecodeError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error")


DOMAIN_ERRORS = (
    TripNotFoundError,
    ReadOnlyTripError,
    ShareLinkTooLongError,
    ExpenseValidationError,
    BlankNameError,
    ShareDecodeError,
)
