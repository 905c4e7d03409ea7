"""FastAPI application exposing the admin back office and the public booking flow."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, Field, ValidationError
from structlog import get_logger

from lavender_stays.clients import SuggestionClientError
from lavender_stays.config import settings
from lavender_stays.services import (
    AlternativeDatesQuery,
    BackOffice,
    EntityService,
    ErrorType,
    OperationResult,
)
from lavender_stays.services.results import field_errors
from lavender_stays.store import RecordNotFoundError

logger = get_logger(__name__)

# URL segment -> BackOffice service attribute
ADMIN_COLLECTIONS = {
    "rooms": "rooms",
    "bookings": "bookings",
    "restaurant-orders": "restaurant_orders",
    "menu-items": "menu",
    "housekeeping-tasks": "housekeeping",
    "guest-service-requests": "guest_services",
}

ERROR_STATUS_CODES = {
    ErrorType.VALIDATION: 422,
    ErrorType.NOT_FOUND: 404,
    ErrorType.REFUSED: 403,
    ErrorType.STORAGE: 500,
}


class StatusChange(BaseModel):
    """Body of a status update. Menu items send ``popular`` instead of ``status``."""

    status: Any = Field(validation_alias=AliasChoices("status", "popular"))


def get_office(request: Request) -> BackOffice:
    return request.app.state.office


def as_documents(records: list[Any]) -> list[dict[str, Any]]:
    return [record.to_document() for record in records]


def result_response(result: OperationResult, success_code: int = 200) -> JSONResponse:
    """Map an OperationResult onto an HTTP status code."""
    if result.success:
        status_code = success_code
    else:
        status_code = ERROR_STATUS_CODES.get(result.error_type, 500)
    return JSONResponse(status_code=status_code, content=result.to_response())


def build_collection_router(segment: str, attribute: str) -> APIRouter:
    """CRUD routes for one collection under ``/api/admin/<segment>``."""
    router = APIRouter(prefix=f"/api/admin/{segment}", tags=["admin"])

    def service(office: BackOffice = Depends(get_office)) -> EntityService:
        return getattr(office, attribute)

    @router.get("")
    def list_records(entity: EntityService = Depends(service)):
        return as_documents(entity.list())

    @router.post("")
    def create_record(
        payload: dict[str, Any] = Body(...), entity: EntityService = Depends(service)
    ):
        return result_response(entity.create(payload), success_code=201)

    @router.patch("/{record_id}")
    def update_record(
        record_id: str,
        changes: dict[str, Any] = Body(...),
        entity: EntityService = Depends(service),
    ):
        return result_response(entity.update(record_id, changes))

    @router.patch("/{record_id}/status")
    def update_record_status(
        record_id: str, change: StatusChange, entity: EntityService = Depends(service)
    ):
        return result_response(entity.update_status(record_id, change.status))

    @router.delete("/{record_id}")
    def delete_record(record_id: str, entity: EntityService = Depends(service)):
        return result_response(entity.delete(record_id))

    return router


settings_router = APIRouter(prefix="/api/admin/settings", tags=["admin"])


@settings_router.get("")
def get_hotel_settings(office: BackOffice = Depends(get_office)):
    return office.get_hotel_settings().to_document()


@settings_router.put("")
def update_hotel_settings(
    changes: dict[str, Any] = Body(...), office: BackOffice = Depends(get_office)
):
    return result_response(office.update_hotel_settings(changes))


public_router = APIRouter(prefix="/api", tags=["public"])


@public_router.get("/bookings")
def list_bookings(office: BackOffice = Depends(get_office)):
    """All booking requests, read straight from the store."""
    try:
        return as_documents(office.store.list_records("booking_requests"))
    except Exception as e:
        logger.error("Error fetching bookings", error=str(e), exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch bookings"})


@public_router.post("/bookings")
def submit_booking(
    form: dict[str, Any] = Body(...), office: BackOffice = Depends(get_office)
):
    return result_response(office.booking_desk.book(form), success_code=201)


@public_router.get("/rooms/available")
def list_available_rooms(
    guests: int = Query(1, ge=1), office: BackOffice = Depends(get_office)
):
    return as_documents(office.booking_desk.search_available_rooms(guests))


@public_router.get("/rooms/{room_id}/quote")
def quote_stay(
    room_id: str,
    check_in: str = Query(..., alias="checkInDate"),
    check_out: str = Query(..., alias="checkOutDate"),
    office: BackOffice = Depends(get_office),
):
    room = office.rooms.get(room_id)
    if room is None:
        return JSONResponse(
            status_code=404, content={"error": office.rooms.not_found_message(room_id)}
        )
    try:
        total = office.booking_desk.quote_stay(room, check_in, check_out)
    except ValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid stay dates.", "errors": field_errors(e)},
        )
    return {
        "roomId": room.id,
        "checkInDate": check_in,
        "checkOutDate": check_out,
        "totalPrice": total,
    }


@public_router.post("/suggestions/alternative-dates")
async def suggest_alternative_dates(
    query: AlternativeDatesQuery, office: BackOffice = Depends(get_office)
):
    try:
        suggestion = await office.booking_desk.suggest_alternative_dates(query)
    except RecordNotFoundError as e:
        return JSONResponse(
            status_code=404, content={"error": office.rooms.not_found_message(e.record_id)}
        )
    except SuggestionClientError as e:
        logger.error("Error fetching date suggestions", error=str(e))
        return JSONResponse(
            status_code=502,
            content={"error": "Could not fetch alternative date suggestions at this time."},
        )
    return suggestion.to_response()


@public_router.get("/menu")
def list_menu(
    category: Optional[str] = None,
    food_type: Optional[str] = Query(None, alias="foodType"),
    office: BackOffice = Depends(get_office),
):
    items = (
        office.list_menu_items_by_category(category)
        if category
        else office.list_menu_items()
    )
    if food_type:
        wanted = {item.id for item in office.list_menu_items_by_food_type(food_type)}
        items = [item for item in items if item.id in wanted]
    return as_documents(items)


def create_app(office: BackOffice) -> FastAPI:
    """Build the FastAPI application around an initialized back office.

    Args:
        office: Back office whose store every request reads and writes

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(title="Lavender Stays API")
    app.state.office = office

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(settings_router)
    for segment, attribute in ADMIN_COLLECTIONS.items():
        app.include_router(build_collection_router(segment, attribute))
    app.include_router(public_router)

    return app
