import pytest

from ride_reservation.platform.logging.loguru_io_utils import MASK, mask_sensitive, truncate_content
from ride_reservation.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    PaymentRequest,
)


pytestmark = pytest.mark.unit


class TestMaskSensitive:
    def test_nested_card_details_are_masked(self):
        data = {'method': 'card', 'details': {'card_number': '4111111111111111'}}

        assert mask_sensitive(data) == {'method': 'card', 'details': MASK}

    def test_card_number_inside_request_model_is_masked(self):
        request = PaymentRequest(method='card', card_number='4111111111111111')

        masked = mask_sensitive((request,))

        assert masked == ({'method': 'card', 'card_number': MASK},)

    def test_plain_values_pass_through(self):
        assert mask_sensitive(['S1', 2]) == ['S1', 2]


class TestTruncateContent:
    def test_long_content_is_cut(self):
        text = 'x' * 5000

        result = truncate_content(text)

        assert isinstance(result, str)
        assert result.endswith('chars)')
        assert len(result) < len(text)

    def test_short_content_is_untouched(self):
        assert truncate_content({'a': 1}) == {'a': 1}
