# API Route Constants

# Base API
API_BASE = '/api'

# Trip catalog routes
TRIP_BASE = f'{API_BASE}/trip'
TRIP_SEARCH = TRIP_BASE
TRIP_SEAT_MAP = f'{TRIP_BASE}/{{trip_id}}/seat'
TRIP_PICKUP = f'{TRIP_BASE}/{{trip_id}}/pickup'

# Reservation session routes
RESERVATION_BASE = f'{API_BASE}/reservation'
RESERVATION_CREATE = RESERVATION_BASE
RESERVATION_GET = f'{RESERVATION_BASE}/{{session_id}}'
RESERVATION_CANCEL = f'{RESERVATION_BASE}/{{session_id}}'
RESERVATION_SEAT = f'{RESERVATION_BASE}/{{session_id}}/seat'
RESERVATION_SEAT_RELEASE = f'{RESERVATION_BASE}/{{session_id}}/seat/{{seat_id}}'
RESERVATION_PICKUP = f'{RESERVATION_BASE}/{{session_id}}/pickup'
RESERVATION_EXTRAS = f'{RESERVATION_BASE}/{{session_id}}/extras'
RESERVATION_PASSENGER = f'{RESERVATION_BASE}/{{session_id}}/passenger'
RESERVATION_ADVANCE = f'{RESERVATION_BASE}/{{session_id}}/advance'
RESERVATION_STEP = f'{RESERVATION_BASE}/{{session_id}}/step'
RESERVATION_PAY = f'{RESERVATION_BASE}/{{session_id}}/pay'

# Booking routes
BOOKING_BASE = f'{API_BASE}/booking'
BOOKING_LIST = BOOKING_BASE
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
