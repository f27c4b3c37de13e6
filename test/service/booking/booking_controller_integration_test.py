from typing import Any

from fastapi.testclient import TestClient
import pytest


SHOWING_PAYLOAD = {
    'movie_title': 'The Matrix',
    'theatre_name': 'Downtown Cinema',
    'screen_name': 'Screen 1',
    'start_at': '2030-01-15T14:00:00+00:00',
    'end_at': '2030-01-15T16:30:00+00:00',
    'layout': [
        {'row': 'A', 'seat_count': 2, 'category': 'vip'},
        {'row': 'B', 'seat_count': 3, 'category': 'premium'},
        {'row': 'C', 'seat_count': 5},
    ],
}


def _booking_payload(showing_id: int, seat_ids: list[int]) -> dict[str, Any]:
    return {
        'showing_id': showing_id,
        'customer_name': 'Jane Doe',
        'customer_email': 'jane@example.com',
        'seat_ids': seat_ids,
    }


@pytest.fixture
def showing_id(client: TestClient) -> int:
    response = client.post('/api/showing', json=SHOWING_PAYLOAD)
    assert response.status_code == 201
    return response.json()['id']


class TestShowingEndpoints:
    def test_register_showing(self, client: TestClient) -> None:
        response = client.post('/api/showing', json=SHOWING_PAYLOAD)

        assert response.status_code == 201
        body = response.json()
        assert body['total_seats'] == body['available_seats'] == 10
        assert body['status'] == 'open_for_booking'
        assert body['status_label'] == 'Open for Booking'

    def test_naive_start_time_rejected(self, client: TestClient) -> None:
        payload = {**SHOWING_PAYLOAD, 'start_at': '2030-01-15T14:00:00'}

        response = client.post('/api/showing', json=payload)

        assert response.status_code == 400

    def test_seat_map(self, client: TestClient, showing_id: int) -> None:
        client.post('/api/booking', json=_booking_payload(showing_id, [1]))

        response = client.get(f'/api/showing/{showing_id}/seats')

        assert response.status_code == 200
        body = response.json()
        assert body['available_seats'] == 9
        assert body['seats'][0]['seat_identifier'] == 'A-1'
        assert body['seats'][0]['status'] == 'booked'
        assert body['seats'][0]['category_label'] == 'VIP'

    def test_seat_map_unknown_showing(self, client: TestClient) -> None:
        assert client.get('/api/showing/999/seats').status_code == 404


class TestBookingEndpoints:
    def test_book_get_and_cancel(self, client: TestClient, showing_id: int) -> None:
        response = client.post('/api/booking', json=_booking_payload(showing_id, [6, 7, 1]))

        assert response.status_code == 201
        booking = response.json()
        assert booking['status'] == 'confirmed'
        assert booking['status_label'] == 'Confirmed'
        assert booking['payment_status'] == 'pending'
        assert booking['pricing']['base_amount'] == 900.0
        assert booking['pricing']['discount_amount'] == 260.0
        assert booking['pricing']['final_amount'] == 640.0
        assert booking['pricing']['discount_description'] == (
            '20% Afternoon Discount + 50% off 3rd ticket'
        )
        assert [seat['seat_identifier'] for seat in booking['seats']] == ['C-1', 'C-2', 'A-1']
        assert booking['show_details']['movie_title'] == 'The Matrix'

        reference = booking['reference']
        fetched = client.get(f'/api/booking/{reference}')
        assert fetched.status_code == 200
        assert fetched.json()['pricing'] == booking['pricing']

        cancelled = client.patch(f'/api/booking/{reference}')
        assert cancelled.status_code == 200
        assert cancelled.json()['status'] == 'cancelled'
        assert cancelled.json()['payment_status_label'] == 'Refunded'

        again = client.patch(f'/api/booking/{reference}')
        assert again.status_code == 400

    def test_taken_seat_returns_conflict(self, client: TestClient, showing_id: int) -> None:
        client.post('/api/booking', json=_booking_payload(showing_id, [2]))

        response = client.post('/api/booking', json=_booking_payload(showing_id, [1, 2]))

        assert response.status_code == 409
        assert response.json()['unavailable_seat_ids'] == [2]

    def test_unknown_showing(self, client: TestClient) -> None:
        response = client.post('/api/booking', json=_booking_payload(999, [1]))

        assert response.status_code == 404

    def test_unknown_reference(self, client: TestClient) -> None:
        assert client.get('/api/booking/BKDOESNOTEXIST00').status_code == 404
        assert client.patch('/api/booking/BKDOESNOTEXIST00').status_code == 404

    @pytest.mark.parametrize(
        'overrides',
        [
            {'seat_ids': []},
            {'seat_ids': list(range(1, 12))},
            {'customer_email': 'not-an-email'},
            {'customer_name': ''},
        ],
    )
    def test_malformed_request(
        self, client: TestClient, showing_id: int, overrides: dict[str, Any]
    ) -> None:
        payload = {**_booking_payload(showing_id, [1]), **overrides}

        response = client.post('/api/booking', json=payload)

        assert response.status_code == 400

    def test_duplicate_seat_ids(self, client: TestClient, showing_id: int) -> None:
        response = client.post('/api/booking', json=_booking_payload(showing_id, [1, 1]))

        assert response.status_code == 400
        assert 'repeat' in response.json()['detail']


def test_health(client: TestClient) -> None:
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'
