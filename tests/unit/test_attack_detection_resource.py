"""Unit tests for the AttackDetection resource."""
import pytest

from keycloak_admin import BruteForceStatus, KeycloakAPIError

BRUTE_FORCE = "/admin/realms/master/attack-detection/brute-force/users"


def test_clear_all_users(keycloak, fake_keycloak):
    fake_keycloak.route("DELETE", BRUTE_FORCE, status=204)

    keycloak.attack_detection().clear("master")

    assert fake_keycloak.last.method == "DELETE"
    assert fake_keycloak.last.path == BRUTE_FORCE


def test_clear_user(keycloak, fake_keycloak):
    fake_keycloak.route("DELETE", f"{BRUTE_FORCE}/u-1", status=204)

    keycloak.attack_detection().clear_user("master", "u-1")

    assert fake_keycloak.last.path == f"{BRUTE_FORCE}/u-1"


def test_user_status(keycloak, fake_keycloak):
    fake_keycloak.route("GET", f"{BRUTE_FORCE}/u-1", {
        "numFailures": 3,
        "disabled": True,
        "lastIPFailure": "10.0.0.7",
        "lastFailure": 1717000000000,
    })

    status = keycloak.attack_detection().user_status("master", "u-1")

    assert isinstance(status, BruteForceStatus)
    assert status.num_failures == 3
    assert status.disabled is True
    assert status.last_ip_failure == "10.0.0.7"


def test_user_status_without_failures(keycloak, fake_keycloak):
    fake_keycloak.route("GET", f"{BRUTE_FORCE}/u-2", {"numFailures": 0, "disabled": False})

    status = keycloak.attack_detection().user_status("master", "u-2")

    assert status.num_failures == 0
    assert status.last_ip_failure is None


def test_clear_requires_permission(keycloak, fake_keycloak):
    fake_keycloak.route("DELETE", BRUTE_FORCE, {"error": "HTTP 403 Forbidden"}, status=403)

    with pytest.raises(KeycloakAPIError) as excinfo:
        keycloak.attack_detection().clear("master")

    assert excinfo.value.status_code == 403
    assert excinfo.value.endpoint == BRUTE_FORCE
