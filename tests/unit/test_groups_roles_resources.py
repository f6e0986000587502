"""Unit tests for the Groups and Roles resources."""
import pytest

from keycloak_admin import Criteria, Group, NotFoundError, Role, UserCollection

GROUPS = "/admin/realms/master/groups"
ROLES = "/admin/realms/master/roles"


class TestGroups:

    def test_all_with_search(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", GROUPS, [{"id": "g-1", "name": "ops", "path": "/ops", "subGroupCount": 0}])

        groups = keycloak.groups().all("master", Criteria(search="ops", exact=True))

        assert groups.first().sub_group_count == 0
        assert fake_keycloak.last.params == {"search": "ops", "exact": "true"}

    def test_create_returns_id(self, keycloak, fake_keycloak):
        fake_keycloak.route("POST", GROUPS, status=201, headers={"Location": f"http://keycloak.test{GROUPS}/g-9"})

        group_id = keycloak.groups().create("master", Group(name="ops", attributes={"team": ["platform"]}))

        assert group_id == "g-9"
        assert fake_keycloak.last.json == {"name": "ops", "attributes": {"team": ["platform"]}}

    def test_get_update_delete(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", f"{GROUPS}/g-1", {"id": "g-1", "name": "ops"})
        fake_keycloak.route("PUT", f"{GROUPS}/g-1", status=204)
        fake_keycloak.route("DELETE", f"{GROUPS}/g-1", status=204)
        groups = keycloak.groups()

        group = groups.get("master", "g-1")
        groups.update("master", group.id, group.with_name("operations"))
        assert fake_keycloak.last.json == {"id": "g-1", "name": "operations"}

        groups.delete("master", "g-1")
        assert fake_keycloak.last.method == "DELETE"

    def test_children_and_create_child(self, keycloak, fake_keycloak):
        children = f"{GROUPS}/g-1/children"
        fake_keycloak.route("GET", children, [{"id": "g-2", "name": "backend", "parentId": "g-1"}])
        fake_keycloak.route("POST", children, status=201, headers={"Location": f"http://keycloak.test{GROUPS}/g-3"})
        groups = keycloak.groups()

        assert groups.children("master", "g-1").first().parent_id == "g-1"
        assert groups.create_child("master", "g-1", Group(name="frontend")) == "g-3"

    def test_by_path_keeps_slashes(self, keycloak, fake_keycloak):
        fake_keycloak.route(
            "GET",
            "/admin/realms/master/group-by-path/engineering/back%20end",
            {"id": "g-2", "path": "/engineering/back end"},
        )

        group = keycloak.groups().by_path("master", "/engineering/back end")

        assert group.id == "g-2"

    def test_members(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", f"{GROUPS}/g-1/members", [{"id": "u-1", "username": "alice"}])

        members = keycloak.groups().members("master", "g-1", Criteria(first=0, max=10))

        assert isinstance(members, UserCollection)
        assert fake_keycloak.last.params == {"first": "0", "max": "10"}

    def test_group_realm_role_mappings(self, keycloak, fake_keycloak):
        path = f"{GROUPS}/g-1/role-mappings/realm"
        fake_keycloak.route("GET", path, [])
        fake_keycloak.route("POST", path, status=204)
        fake_keycloak.route("DELETE", path, status=204)
        groups = keycloak.groups()

        assert groups.retrieve_realm_roles("master", "g-1").count() == 0
        groups.add_realm_roles("master", "g-1", [Role(id="r-1", name="viewer")])
        assert fake_keycloak.last.json == [{"id": "r-1", "name": "viewer"}]
        groups.remove_realm_roles("master", "g-1", [Role(id="r-1", name="viewer")])
        assert fake_keycloak.last.method == "DELETE"


class TestRoles:

    def test_all(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", ROLES, [{"id": "r-1", "name": "offline_access", "composite": False}])
        assert keycloak.roles().all("master").first().name == "offline_access"

    def test_get_by_name_is_quoted(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", f"{ROLES}/report%20reader", {"id": "r-5", "name": "report reader"})
        assert keycloak.roles().get("master", "report reader").id == "r-5"

    def test_get_missing_role(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", f"{ROLES}/nope", {"error": "Could not find role"}, status=404)
        with pytest.raises(NotFoundError):
            keycloak.roles().get("master", "nope")

    def test_create_returns_role_name(self, keycloak, fake_keycloak):
        fake_keycloak.route(
            "POST", ROLES, status=201, headers={"Location": f"http://keycloak.test{ROLES}/report%20reader"}
        )

        name = keycloak.roles().create("master", Role(name="report reader", description="Reads reports"))

        assert name == "report reader"
        assert fake_keycloak.last.json == {"name": "report reader", "description": "Reads reports"}

    def test_create_without_location_returns_given_name(self, keycloak, fake_keycloak):
        fake_keycloak.route("POST", ROLES, status=201)
        roles = keycloak.roles()

        assert roles.create("master", Role(name="viewer")) == "viewer"
        assert roles.create("master", {"name": "editor"}) == "editor"

    def test_update_and_delete_by_name(self, keycloak, fake_keycloak):
        fake_keycloak.route("PUT", f"{ROLES}/viewer", status=204)
        fake_keycloak.route("DELETE", f"{ROLES}/viewer", status=204)
        roles = keycloak.roles()

        roles.update("master", "viewer", {"name": "viewer", "description": "Read only"})
        assert fake_keycloak.last.json == {"name": "viewer", "description": "Read only"}
        roles.delete("master", "viewer")
        assert fake_keycloak.last.path == f"{ROLES}/viewer"

    def test_users_with_role(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", f"{ROLES}/admin/users", [{"id": "u-1"}, {"id": "u-2"}])
        assert keycloak.roles().users("master", "admin").count() == 2

    def test_composites_are_decoded(self, keycloak, fake_keycloak):
        fake_keycloak.route("GET", f"{ROLES}/default-roles-master", {
            "name": "default-roles-master",
            "composite": True,
            "composites": {"realm": ["offline_access"], "client": {"account": ["view-profile"]}},
        })

        role = keycloak.roles().get("master", "default-roles-master")

        assert role.composites.realm == ["offline_access"]
        assert role.composites.client == {"account": ["view-profile"]}


def test_group_realm_roles_pass_criteria(keycloak, fake_keycloak):
    fake_keycloak.route("GET", f"{GROUPS}/g-1/role-mappings/realm", [])

    keycloak.groups().retrieve_realm_roles("master", "g-1", Criteria(briefRepresentation=False))

    assert fake_keycloak.last.params == {"briefRepresentation": "false"}
