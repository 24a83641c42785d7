from datetime import date, datetime, time
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ride_reservation.platform.types import UtilsUUID7
from ride_reservation.service.reservation.app.dto.reservation_session_view_dto import (
    ReservationSessionView,
)
from ride_reservation.service.reservation.app.dto.seat_map_dto import SeatMapView
from ride_reservation.service.reservation.domain.entity.booking_entity import Booking
from ride_reservation.service.reservation.domain.entity.trip_entity import PickupPoint, Trip
from ride_reservation.service.reservation.domain.fare_calculator import FareBreakdown
from ride_reservation.service.reservation.domain.value_object.money import Money


# ========== Requests ==========


class CreateReservationRequest(BaseModel):
    trip_id: str

    model_config = ConfigDict(json_schema_extra={'example': {'trip_id': 'r1-t1'}})


class SelectSeatRequest(BaseModel):
    seat_id: str

    model_config = ConfigDict(json_schema_extra={'example': {'seat_id': 'r1-t1-v1-s3'}})


class SetPickupRequest(BaseModel):
    needed: bool
    pickup_point_id: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'needed': True, 'pickup_point_id': 'hp1'}}
    )


class ExtraSelectionItem(BaseModel):
    extra_id: str
    quantity: int = Field(default=1, ge=0)


class SetExtrasRequest(BaseModel):
    extras: List[ExtraSelectionItem] = []

    model_config = ConfigDict(
        json_schema_extra={'example': {'extras': [{'extra_id': 'e1', 'quantity': 1}]}}
    )


class SetPassengerRequest(BaseModel):
    name: str

    model_config = ConfigDict(json_schema_extra={'example': {'name': 'Ada Lovelace'}})


class GoToStepRequest(BaseModel):
    step: int


class PaymentRequest(BaseModel):
    method: Literal['card', 'wallet'] = 'card'
    card_number: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'method': 'card', 'card_number': '4111111111111111'}}
    )


# ========== Responses ==========


class MoneyResponse(BaseModel):
    amount: str
    currency: str


def _money(value: Money) -> MoneyResponse:
    return MoneyResponse(amount=str(value), currency=value.currency)


class FareResponse(BaseModel):
    seats_total: MoneyResponse
    pickup_fee: MoneyResponse
    extras_total: MoneyResponse
    total: MoneyResponse

    @classmethod
    def from_breakdown(cls, fare: FareBreakdown) -> 'FareResponse':
        return cls(
            seats_total=_money(fare.seats_total),
            pickup_fee=_money(fare.pickup_fee),
            extras_total=_money(fare.extras_total),
            total=_money(fare.total),
        )


class PickupPointResponse(BaseModel):
    id: str
    name: str
    address: str
    fee: MoneyResponse

    @classmethod
    def from_point(cls, point: PickupPoint) -> 'PickupPointResponse':
        return cls(id=point.id, name=point.name, address=point.address, fee=_money(point.fee))


class TravelExtraResponse(BaseModel):
    id: str
    name: str
    description: str
    price: MoneyResponse


class TripResponse(BaseModel):
    id: str
    origin: str
    destination: str
    departure_date: date
    departure_time: time
    vehicle_id: str
    base_price: MoneyResponse
    capacity: int
    extras: List[TravelExtraResponse] = []

    @classmethod
    def from_trip(cls, trip: Trip) -> 'TripResponse':
        return cls(
            id=trip.id,
            origin=trip.origin,
            destination=trip.destination,
            departure_date=trip.departure_date,
            departure_time=trip.departure_time,
            vehicle_id=trip.vehicle_id,
            base_price=_money(trip.base_price),
            capacity=trip.capacity,
            extras=[
                TravelExtraResponse(
                    id=extra.id,
                    name=extra.name,
                    description=extra.description,
                    price=_money(extra.price),
                )
                for extra in trip.extras
            ],
        )


class SeatMapSeatResponse(BaseModel):
    id: str
    number: str
    seat_class: str
    price: MoneyResponse
    status: str


class SeatMapResponse(BaseModel):
    trip_id: str
    available: int
    seats: List[SeatMapSeatResponse]

    @classmethod
    def from_view(cls, view: SeatMapView) -> 'SeatMapResponse':
        return cls(
            trip_id=view.trip.id,
            available=view.available_count,
            seats=[
                SeatMapSeatResponse(
                    id=entry.seat.id,
                    number=entry.seat.number,
                    seat_class=entry.seat.seat_class.value,
                    price=_money(entry.seat.price),
                    status=entry.status.value,
                )
                for entry in view.seats
            ],
        )


class SessionSeatResponse(BaseModel):
    seat_id: str
    number: str
    seat_class: str
    price: MoneyResponse
    hold_expires_at: datetime
    hold_live: bool


class SessionExtraResponse(BaseModel):
    extra_id: str
    name: str
    quantity: int
    unit_price: MoneyResponse
    line_total: MoneyResponse


class ReservationSessionResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'session_id': '01234567-89ab-7def-0123-456789abcdef',
                'step': 3,
                'step_name': 'SEAT_SELECTED',
                'status': 'active',
                'payment_status': 'not_attempted',
            }
        }
    )

    session_id: UtilsUUID7
    trip: TripResponse
    step: int
    step_name: str
    status: str
    seats: List[SessionSeatResponse]
    pickup_requested: bool
    pickup_point: Optional[PickupPointResponse] = None
    extras: List[SessionExtraResponse]
    fare: FareResponse
    passenger_name: Optional[str] = None
    payment_status: str
    payment_reference: Optional[str] = None
    booking_id: Optional[UtilsUUID7] = None
    created_at: datetime
    last_activity_at: datetime

    @classmethod
    def from_view(cls, view: ReservationSessionView) -> 'ReservationSessionResponse':
        return cls(
            session_id=view.session_id,
            trip=TripResponse.from_trip(view.trip),
            step=view.step.value,
            step_name=view.step.name,
            status=view.status.value,
            seats=[
                SessionSeatResponse(
                    seat_id=seat.seat_id,
                    number=seat.number,
                    seat_class=seat.seat_class.value,
                    price=_money(seat.price),
                    hold_expires_at=seat.hold_expires_at,
                    hold_live=seat.hold_live,
                )
                for seat in view.seats
            ],
            pickup_requested=view.pickup_requested,
            pickup_point=(
                PickupPointResponse.from_point(view.pickup_point) if view.pickup_point else None
            ),
            extras=[
                SessionExtraResponse(
                    extra_id=extra.extra_id,
                    name=extra.name,
                    quantity=extra.quantity,
                    unit_price=_money(extra.unit_price),
                    line_total=_money(extra.line_total),
                )
                for extra in view.extras
            ],
            fare=FareResponse.from_breakdown(view.fare),
            passenger_name=view.passenger_name,
            payment_status=view.payment_status.value,
            payment_reference=view.payment_reference,
            booking_id=view.booking_id,
            created_at=view.created_at,
            last_activity_at=view.last_activity_at,
        )


class BookingExtraResponse(BaseModel):
    extra_id: str
    quantity: int


class BookingResponse(BaseModel):
    id: UtilsUUID7
    session_id: UtilsUUID7
    trip_id: str
    seat_ids: List[str]
    passenger_name: str
    pickup_point: Optional[PickupPointResponse] = None
    extras: List[BookingExtraResponse] = []
    total_price: MoneyResponse
    payment_reference: str
    confirmation_code: str
    created_at: datetime

    @classmethod
    def from_booking(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id,
            session_id=booking.session_id,
            trip_id=booking.trip_id,
            seat_ids=list(booking.seat_ids),
            passenger_name=booking.passenger_name,
            pickup_point=(
                PickupPointResponse.from_point(booking.pickup_point)
                if booking.pickup_point
                else None
            ),
            extras=[
                BookingExtraResponse(extra_id=extra.extra_id, quantity=extra.quantity)
                for extra in booking.extras
            ],
            total_price=_money(booking.total_price),
            payment_reference=booking.payment_reference,
            confirmation_code=booking.confirmation_code,
            created_at=booking.created_at,
        )
