"""
Unit tests for credential and potion validation.
"""
import pytest

from app.core.errors import ValidationError
from app.services.auth_service import validate_credentials
from app.services.potion_service import validate_potion


class TestValidateCredentials:

    def test_valid_input_is_cleaned(self):
        assert validate_credentials(" merlin ", "  azkaban123 ") == ("merlin", "azkaban123")

    @pytest.mark.parametrize("name", ["abc", "a" * 30])
    def test_name_length_bounds_accepted(self, name):
        assert validate_credentials(name, "secret1")[0] == name

    @pytest.mark.parametrize("name", ["ab", "a" * 31])
    def test_name_length_bounds_rejected(self, name):
        with pytest.raises(ValidationError) as exc:
            validate_credentials(name, "secret1")
        assert [i.param for i in exc.value.issues] == ["name"]

    def test_all_fields_reported_together(self):
        with pytest.raises(ValidationError) as exc:
            validate_credentials(None, None)
        issues = exc.value.issues
        assert [(i.param, i.msg) for i in issues] == [
            ("name", "Name is required."),
            ("password", "Password is required."),
        ]
        assert {i.location for i in issues} == {"body"}

    def test_one_issue_per_field(self):
        with pytest.raises(ValidationError) as exc:
            validate_credentials("", "")
        assert len(exc.value.issues) == 2

    @pytest.mark.parametrize("name", ["<", "&&", "a" * 2 + "\x00"])
    def test_short_names_with_special_characters_rejected(self, name):
        with pytest.raises(ValidationError) as exc:
            validate_credentials(name, "secret1")
        assert [i.param for i in exc.value.issues] == ["name"]

    @pytest.mark.parametrize("name", ["&&&", "<" * 30, "O'Brien"])
    def test_names_with_special_characters_kept_verbatim(self, name):
        assert validate_credentials(name, "secret1")[0] == name

    def test_short_password_with_special_characters_rejected(self):
        with pytest.raises(ValidationError) as exc:
            validate_credentials("merlin", "<>")
        assert exc.value.issues[0].msg == "Minimum 6 characters."

    def test_password_escaped_after_length_check(self):
        assert validate_credentials("merlin", "<<<<<<")[1] == "&lt;" * 6

    def test_password_length_counted_after_trim(self):
        with pytest.raises(ValidationError) as exc:
            validate_credentials("merlin", "  12345  ")
        assert exc.value.issues[0].msg == "Minimum 6 characters."

    def test_error_body_shape(self):
        with pytest.raises(ValidationError) as exc:
            validate_credentials("merlin", "")
        body = exc.value.to_body()
        assert body["errors"] == [{"param": "password", "msg": "Password is required.", "location": "body"}]
        assert "password" in body["error"]


class TestValidatePotion:

    def _doc(self, **overrides):
        doc = {
            "name": "Elixir",
            "effects": {"strength": 1, "flavor": 2},
            "price": 3,
            "vendorId": "v1",
        }
        doc.update(overrides)
        return doc

    def test_defaults(self):
        potion = validate_potion(self._doc())
        assert potion.score == 0
        assert potion.ingredients == []
        assert potion.categories == []

    def test_ingredients_accept_any_json(self):
        mixed = ["herb", 1.5, False, None, {"nested": [1, "two"]}, [3]]
        assert validate_potion(self._doc(ingredients=mixed)).ingredients == mixed

    @pytest.mark.parametrize("missing", ["name", "effects", "price", "vendorId"])
    def test_required_fields(self, missing):
        doc = self._doc()
        del doc[missing]
        with pytest.raises(ValidationError) as exc:
            validate_potion(doc)
        assert exc.value.issues[0].param == missing

    def test_effects_must_be_numeric(self):
        with pytest.raises(ValidationError) as exc:
            validate_potion(self._doc(effects={"strength": "strong", "flavor": None}))
        assert sorted(i.param for i in exc.value.issues) == ["effects.flavor", "effects.strength"]

    def test_unknown_keys_ignored(self):
        potion = validate_potion(self._doc(color="blue"))
        assert not hasattr(potion, "color")
