import json

from fastapi.exceptions import RequestValidationError
import pytest

from ride_reservation.platform.exception.exception_handlers import validation_error_handler


pytestmark = pytest.mark.unit


class TestValidationErrorHandler:
    @pytest.mark.asyncio
    async def test_error_context_holding_an_exception_is_serialized(self):
        error = RequestValidationError(
            [
                {
                    'type': 'value_error',
                    'loc': ('path', 'session_id'),
                    'msg': 'Value error, Invalid UUID: not-a-uuid',
                    'input': 'not-a-uuid',
                    'ctx': {'error': ValueError('Invalid UUID: not-a-uuid')},
                }
            ]
        )

        response = await validation_error_handler(None, error)  # type: ignore[arg-type]

        assert response.status_code == 400
        detail = json.loads(response.body)['detail']
        assert detail[0]['loc'] == ['path', 'session_id']
        assert detail[0]['ctx'] == {'error': 'Invalid UUID: not-a-uuid'}
