from openapi_ir.ir.document import OpenApiInfo, TagGroup


class TestOpenApiInfo:
    def test_from_dict_minimal(self):
        info = OpenApiInfo.from_dict({"title": "My API", "version": "1.0.0"})
        assert info.description == ""
        assert info.terms_of_service is None
        assert info.contact is None
        assert info.license is None
        assert info.has_contact() is False
        assert info.has_license() is False
        assert info.has_terms_of_service() is False

    def test_to_dict_minimal_omits_optional_fields(self):
        info = OpenApiInfo.from_dict({"title": "My API", "version": "1.0.0"})
        assert info.to_dict() == {"title": "My API", "version": "1.0.0"}

    def test_missing_title_and_version_are_empty(self):
        info = OpenApiInfo.from_dict({})
        assert info.title == ""
        assert info.version == ""
        assert info.to_dict() == {"title": "", "version": ""}

    def test_full(self):
        info = OpenApiInfo.from_dict({
            "title": "Shop",
            "version": "2.0",
            "description": "Shop API",
            "termsOfService": "https://example.com/terms",
            "contact": {"name": "Team", "email": "team@example.com"},
            "license": {"name": "MIT"},
        })
        assert info.has_contact() is True
        assert info.has_license() is True
        assert info.has_terms_of_service() is True
        assert info.to_dict() == {
            "title": "Shop",
            "version": "2.0",
            "description": "Shop API",
            "termsOfService": "https://example.com/terms",
            "contact": {"name": "Team", "email": "team@example.com"},
            "license": {"name": "MIT"},
        }

    def test_round_trip(self):
        info = OpenApiInfo(title="Shop", version="1", license={"name": "Apache-2.0"})
        assert OpenApiInfo.from_dict(info.to_dict()) == info

    def test_contact_and_license_keep_extensions(self):
        info = OpenApiInfo.from_dict({
            "title": "Shop",
            "version": "1",
            "contact": {"name": "Team", "x-team-id": 5},
            "license": {"name": "MIT", "x-logo": {"url": "https://example.com/logo.png"}},
        })
        assert info.contact["x-team-id"] == 5
        assert info.license["x-logo"] == {"url": "https://example.com/logo.png"}
        assert OpenApiInfo.from_dict(info.to_dict()) == info

    def test_to_dict_does_not_share_contact(self):
        info = OpenApiInfo(title="Shop", version="1", contact={"name": "Team"}, license={"name": "MIT"})
        data = info.to_dict()
        data["contact"]["name"] = "Changed"
        data["license"]["url"] = "https://example.com"
        assert info.contact == {"name": "Team"}
        assert info.license == {"name": "MIT"}


class TestTagGroup:
    def test_contains_tag_is_case_sensitive(self):
        group = TagGroup(name="Accounts", tags=["User"])
        assert group.contains_tag("User") is True
        assert group.contains_tag("user") is False

    def test_empty_group(self):
        group = TagGroup(name="Empty")
        assert group.has_tags() is False
        assert group.get_tag_count() == 0

    def test_counts_and_order(self):
        group = TagGroup(name="Commerce", tags=["Product", "Order", "Cart"])
        assert group.has_tags() is True
        assert group.get_tag_count() == 3
        assert group.tags == ["Product", "Order", "Cart"]

    def test_round_trip(self):
        group = TagGroup(name="Commerce", tags=["Order"])
        assert group.to_dict() == {"name": "Commerce", "tags": ["Order"]}
        assert TagGroup.from_dict(group.to_dict()) == group
