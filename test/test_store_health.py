"""
Tests para StoreHealth, el flag de conectividad que lee el gate de /tasks.
"""

import pytest

from core.domain.models.store_health import StoreHealth


class TestStoreHealth:
    """Suite de tests para StoreHealth."""

    @pytest.fixture
    def health(self):
        return StoreHealth(name="TestDB")

    # ── Estado inicial ────────────────────────────────────────────────────────

    def test_initial_state_is_unknown_and_available(self, health):
        """Sin comprobar todavía: no se bloquean peticiones."""
        assert health.state == StoreHealth.UNKNOWN
        assert health.is_available is True
        assert health.last_checked is None

    # ── Transiciones ──────────────────────────────────────────────────────────

    def test_failure_marks_unhealthy(self, health):
        health.record_failure(ConnectionError("refused"))

        assert health.state == StoreHealth.UNHEALTHY
        assert health.is_available is False
        assert health.last_error == "refused"
        assert health.last_checked is not None

    def test_success_marks_healthy_and_clears_error(self, health):
        health.record_failure("timeout")
        health.record_success()

        assert health.state == StoreHealth.HEALTHY
        assert health.is_available is True
        assert health.last_error is None

    def test_single_failure_trips_immediately(self, health):
        """No hay umbral: basta un fallo para que el gate responda 503."""
        health.record_success()
        health.record_failure("boom")

        assert health.is_available is False

    @pytest.mark.parametrize("error", [
        ConnectionError("connection refused"),
        TimeoutError("timed out"),
        "plain message",
    ])
    def test_failure_keeps_error_message(self, health, error):
        health.record_failure(error)

        assert health.last_error == str(error)
