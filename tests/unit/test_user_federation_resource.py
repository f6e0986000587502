"""Unit tests for the UserFederation resource."""
import pytest

from keycloak_admin import (
    Component,
    ComponentCollection,
    Criteria,
    UserFederationMapper,
    UserFederationMapperCollection,
)
from keycloak_admin.representation import LDAP_STORAGE_MAPPER, USER_STORAGE_PROVIDER

COMPONENTS = "/admin/realms/demo/components"

LDAP_PROVIDER = {
    "id": "ldap-1",
    "name": "corporate-ldap",
    "providerId": "ldap",
    "providerType": USER_STORAGE_PROVIDER,
    "parentId": "demo",
    "config": {"connectionUrl": ["ldap://ldap.test:389"], "editMode": ["READ_ONLY"]},
}


def test_providers_filter_by_storage_type(keycloak, fake_keycloak):
    fake_keycloak.route("GET", COMPONENTS, [LDAP_PROVIDER])

    providers = keycloak.user_federation().providers("demo")

    assert isinstance(providers, ComponentCollection)
    assert providers.first().config["editMode"] == ["READ_ONLY"]
    assert fake_keycloak.last.params == {"type": USER_STORAGE_PROVIDER}


def test_providers_keep_extra_filters(keycloak, fake_keycloak):
    fake_keycloak.route("GET", COMPONENTS, [])

    keycloak.user_federation().providers("demo", Criteria(name="corporate-ldap"))

    assert fake_keycloak.last.params == {"name": "corporate-ldap", "type": USER_STORAGE_PROVIDER}


def test_get(keycloak, fake_keycloak):
    fake_keycloak.route("GET", f"{COMPONENTS}/ldap-1", LDAP_PROVIDER)

    provider = keycloak.user_federation().get("demo", "ldap-1")

    assert provider.provider_id == "ldap"
    assert provider.parent_id == "demo"


@pytest.mark.parametrize("component", [
    Component(name="corporate-ldap", provider_id="ldap"),
    {"name": "corporate-ldap", "providerId": "ldap"},
])
def test_create_defaults_provider_type(keycloak, fake_keycloak, component):
    fake_keycloak.route("POST", COMPONENTS, status=201, headers={"Location": f"http://keycloak.test{COMPONENTS}/ldap-2"})

    provider_id = keycloak.user_federation().create("demo", component)

    assert provider_id == "ldap-2"
    assert fake_keycloak.last.json == {
        "name": "corporate-ldap",
        "providerId": "ldap",
        "providerType": USER_STORAGE_PROVIDER,
    }


def test_create_keeps_explicit_provider_type(keycloak, fake_keycloak):
    fake_keycloak.route("POST", COMPONENTS, status=201, headers={"Location": f"http://keycloak.test{COMPONENTS}/k-1"})

    keycloak.user_federation().create("demo", Component(name="kerberos", provider_type="custom.Type"))

    assert fake_keycloak.last.json["providerType"] == "custom.Type"


def test_update_and_delete(keycloak, fake_keycloak):
    fake_keycloak.route("PUT", f"{COMPONENTS}/ldap-1", status=204)
    fake_keycloak.route("DELETE", f"{COMPONENTS}/ldap-1", status=204)
    federation = keycloak.user_federation()

    provider = Component.from_json(LDAP_PROVIDER)
    federation.update("demo", "ldap-1", provider.with_name("ldap"))
    assert fake_keycloak.last.json["name"] == "ldap"
    assert fake_keycloak.last.json["config"] == LDAP_PROVIDER["config"]

    federation.delete("demo", "ldap-1")
    assert fake_keycloak.last.method == "DELETE"


def test_mappers(keycloak, fake_keycloak):
    fake_keycloak.route("GET", COMPONENTS, [
        {"id": "m-1", "name": "email", "providerId": "user-attribute-ldap-mapper", "parentId": "ldap-1"},
    ])

    mappers = keycloak.user_federation().mappers("demo", "ldap-1")

    assert isinstance(mappers, UserFederationMapperCollection)
    mapper = mappers.first()
    assert isinstance(mapper, UserFederationMapper)
    assert mapper.federation_provider_id == "ldap-1"
    assert fake_keycloak.last.params == {"parent": "ldap-1", "type": LDAP_STORAGE_MAPPER}


def test_sync_returns_result(keycloak, fake_keycloak):
    fake_keycloak.route("POST", "/admin/realms/demo/user-storage/ldap-1/sync", {
        "ignored": False, "added": 4, "updated": 1, "removed": 0, "failed": 0, "status": "4 imported users, 1 updated users",
    })

    result = keycloak.user_federation().sync("demo", "ldap-1", action="triggerFullSync")

    assert result["added"] == 4
    assert fake_keycloak.last.params == {"action": "triggerFullSync"}


def test_sync_with_empty_body(keycloak, fake_keycloak):
    fake_keycloak.route("POST", "/admin/realms/demo/user-storage/ldap-1/sync", status=204)

    assert keycloak.user_federation().sync("demo", "ldap-1") == {}
    assert fake_keycloak.last.params == {"action": "triggerChangedUsersSync"}


def test_sync_rejects_unknown_action(keycloak, fake_keycloak):
    with pytest.raises(ValueError, match="Unknown sync action"):
        keycloak.user_federation().sync("demo", "ldap-1", action="triggerEverything")
    assert fake_keycloak.calls == []


def test_mappers_keep_extra_filters(keycloak, fake_keycloak):
    fake_keycloak.route("GET", COMPONENTS, [])

    keycloak.user_federation().mappers("demo", "ldap-1", criteria=Criteria(name="email"))

    assert fake_keycloak.last.params == {"name": "email", "parent": "ldap-1", "type": LDAP_STORAGE_MAPPER}
