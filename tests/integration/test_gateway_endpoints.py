"""Integration tests for the owner details endpoint of the API gateway.

The gateway app runs with real upstream clients whose transports are
``StubUpstream`` fakes of the customers and visits services.

Test Organization:
- TestOwnerDetailsComposition: Successful aggregation
- TestOwnerIdValidation: Malformed owner ids
- TestCustomersServiceFailures: Owner lookup failures surface as errors
- TestVisitsServiceDegradation: Visits failures degrade to empty visits
- TestRequestContext: Trace id propagation
"""

import httpx
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from tests.fakes import StubUpstream
from tests.factories import owner_payload, pet_payload, visit_payload, visits_payload


OWNER_PATH = "/api/gateway/owners/{owner_id}"


def serve_owner_with_two_pets(customers_upstream: StubUpstream) -> None:
    customers_upstream.respond(
        200,
        json=owner_payload(
            id=6,
            first_name="Jean",
            last_name="Coleman",
            pets=[pet_payload(id=7, name="Samantha"), pet_payload(id=8, name="Max")],
        ),
    )


# ============================================================================
# Composition Tests
# ============================================================================


class TestOwnerDetailsComposition:
    """Test GET /api/gateway/owners/{ownerId} on the happy path."""

    def test_splices_visits_into_pets(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        """Test each pet carries its own visits.

        Arrange: Owner 6 with pets 7 and 8; visits 1 and 4 for pet 7
        Act: GET owner 6 details
        Assert: 200, pet 7 has visits [1, 4], pet 8 has none
        """
        # Arrange
        serve_owner_with_two_pets(customers_upstream)
        visits_upstream.respond(
            200,
            json=visits_payload(
                visit_payload(pet_id=7, id=1, visit_date="2013-01-01", description="rabies shot"),
                visit_payload(pet_id=7, id=4, visit_date="2013-01-04", description="spayed"),
            ),
        )

        # Act
        response = gateway_client.get(OWNER_PATH.format(owner_id=6))

        # Assert
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == 6
        assert data["firstName"] == "Jean"
        assert [pet["id"] for pet in data["pets"]] == [7, 8]
        assert [visit["id"] for visit in data["pets"][0]["visits"]] == [1, 4]
        assert data["pets"][0]["visits"][0] == {
            "id": 1,
            "date": "2013-01-01",
            "description": "rabies shot",
        }
        assert data["pets"][1]["visits"] == []

    def test_queries_visits_for_all_pets_in_order(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        # Arrange
        serve_owner_with_two_pets(customers_upstream)

        # Act
        gateway_client.get(OWNER_PATH.format(owner_id=6))

        # Assert
        assert customers_upstream.requests[0].url.path == "/owners/6"
        assert visits_upstream.call_count == 1
        assert visits_upstream.requests[0].url.params["petIds"] == "7,8"

    def test_drops_visits_of_unknown_pets(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        # Arrange
        serve_owner_with_two_pets(customers_upstream)
        visits_upstream.respond(200, json=visits_payload(visit_payload(pet_id=99, id=5)))

        # Act
        data = gateway_client.get(OWNER_PATH.format(owner_id=6)).json()

        # Assert
        assert all(pet["visits"] == [] for pet in data["pets"])

    def test_owner_without_pets_skips_visits_service(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        """Test an owner with no pets never reaches the visits service.

        Arrange: Owner 10 with no pets
        Act: GET owner 10 details
        Assert: 200 with empty pets, no visits request
        """
        # Arrange
        customers_upstream.respond(200, json=owner_payload(id=10, pets=[]))

        # Act
        response = gateway_client.get(OWNER_PATH.format(owner_id=10))

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["pets"] == []
        assert visits_upstream.call_count == 0


# ============================================================================
# Owner Id Validation Tests
# ============================================================================


class TestOwnerIdValidation:
    """Test malformed owner ids are rejected before any upstream call."""

    @pytest.mark.parametrize("owner_id", ["abc", "0", "-3", "1.5"])
    def test_invalid_owner_id_is_bad_request(
        self,
        owner_id: str,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
    ) -> None:
        # Act
        response = gateway_client.get(OWNER_PATH.format(owner_id=owner_id))

        # Assert
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["code"] == "BAD_REQUEST"
        assert customers_upstream.call_count == 0


# ============================================================================
# Customers Service Failure Tests
# ============================================================================


class TestCustomersServiceFailures:
    """Test owner lookup failures are never degraded."""

    def test_unknown_owner_is_not_found(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        """Test a 404 from the customers service becomes a 404.

        Arrange: Customers service answering 404
        Act: GET owner 99 details
        Assert: 404 UPSTREAM_NOT_FOUND, visits service not called
        """
        # Arrange
        customers_upstream.respond(404, json={"error": "not found"})

        # Act
        response = gateway_client.get(OWNER_PATH.format(owner_id=99))

        # Assert
        assert response.status_code == status.HTTP_404_NOT_FOUND
        error = response.json()["error"]
        assert error["code"] == "UPSTREAM_NOT_FOUND"
        assert error["details"]["service"] == "customers"
        assert visits_upstream.call_count == 0

    @pytest.mark.parametrize("status_code", [500, 503])
    def test_customers_error_status_is_bad_gateway(
        self,
        status_code: int,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
    ) -> None:
        customers_upstream.respond(status_code, json={})

        response = gateway_client.get(OWNER_PATH.format(owner_id=6))

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["error"]["code"] == "UPSTREAM_PROTOCOL"

    def test_unreachable_customers_service_is_bad_gateway(
        self, gateway_client: TestClient, customers_upstream: StubUpstream
    ) -> None:
        customers_upstream.fail_with(httpx.ConnectError)

        response = gateway_client.get(OWNER_PATH.format(owner_id=6))

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["error"]["code"] == "UPSTREAM_TRANSPORT"

    def test_customers_failures_do_not_open_visits_circuit(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        # Arrange
        customers_upstream.fail_with(httpx.ConnectError)
        for _ in range(5):
            gateway_client.get(OWNER_PATH.format(owner_id=6))
        serve_owner_with_two_pets(customers_upstream)

        # Act
        response = gateway_client.get(OWNER_PATH.format(owner_id=6))

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert visits_upstream.call_count == 1


# ============================================================================
# Visits Service Degradation Tests
# ============================================================================


class TestVisitsServiceDegradation:
    """Test visits failures yield the owner with empty visits."""

    @pytest.mark.parametrize(
        "break_visits",
        [
            lambda upstream: upstream.respond(500, json={}),
            lambda upstream: upstream.respond(200, content=b"not json"),
            lambda upstream: upstream.fail_with(httpx.ConnectError),
            lambda upstream: upstream.hang(5.0),
        ],
        ids=["server-error", "bad-body", "unreachable", "deadline"],
    )
    def test_visits_failure_returns_owner_with_empty_visits(
        self,
        break_visits,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        """Test every kind of visits failure degrades instead of failing.

        Arrange: Owner with two pets; visits service broken
        Act: GET owner details
        Assert: 200, pets present, all visit lists empty
        """
        # Arrange
        serve_owner_with_two_pets(customers_upstream)
        break_visits(visits_upstream)

        # Act
        response = gateway_client.get(OWNER_PATH.format(owner_id=6))

        # Assert
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [pet["id"] for pet in data["pets"]] == [7, 8]
        assert all(pet["visits"] == [] for pet in data["pets"])

    def test_open_circuit_stops_calling_visits_service(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        """Test the visits circuit opens after repeated failures.

        Arrange: Visits service answering 500; breaker opens after 3 failures
        Act: GET owner details five times
        Assert: All 200, visits service called only three times
        """
        # Arrange
        serve_owner_with_two_pets(customers_upstream)
        visits_upstream.respond(500, json={})

        # Act
        responses = [gateway_client.get(OWNER_PATH.format(owner_id=6)) for _ in range(5)]

        # Assert
        assert all(response.status_code == status.HTTP_200_OK for response in responses)
        assert visits_upstream.call_count == 3
        assert customers_upstream.call_count == 5

    def test_open_circuit_is_shared_across_owners(
        self,
        gateway_client: TestClient,
        customers_upstream: StubUpstream,
        visits_upstream: StubUpstream,
    ) -> None:
        # Arrange
        serve_owner_with_two_pets(customers_upstream)
        visits_upstream.respond(500, json={})
        for _ in range(3):
            gateway_client.get(OWNER_PATH.format(owner_id=6))
        customers_upstream.respond(200, json=owner_payload(id=7, pets=[pet_payload(id=9)]))
        visits_upstream.respond(200, json=visits_payload(visit_payload(pet_id=9, id=1)))

        # Act
        response = gateway_client.get(OWNER_PATH.format(owner_id=7))

        # Assert
        assert response.json()["pets"][0]["visits"] == []
        assert visits_upstream.call_count == 3


# ============================================================================
# Request Context Tests
# ============================================================================


class TestRequestContext:
    """Test trace id handling on gateway responses."""

    def test_generates_trace_id(
        self, gateway_client: TestClient, customers_upstream: StubUpstream
    ) -> None:
        customers_upstream.respond(200, json=owner_payload(id=6))

        response = gateway_client.get(OWNER_PATH.format(owner_id=6))

        assert response.headers["X-Trace-ID"]

    def test_echoes_incoming_trace_id_on_errors(self, gateway_client: TestClient) -> None:
        response = gateway_client.get(
            OWNER_PATH.format(owner_id=99), headers={"X-Trace-ID": "trace-abc-123"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.headers["X-Trace-ID"] == "trace-abc-123"
