from modules.auth.models import (
    RegisterRequest,
    TokenClaims,
    User,
    UserRecord,
)


class TestRegisterRequest:
    def test_accepts_camel_case_keys(self):
        request = RegisterRequest.model_validate({
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "password": "pw",
        })
        assert request.first_name == "Ada"
        assert request.last_name == "Lovelace"

    def test_fields_optional(self):
        request = RegisterRequest.model_validate({})
        assert request.first_name is None
        assert request.password is None


class TestTokenClaims:
    def test_datetimes(self):
        claims = TokenClaims(sub="u", iat=1704067200, exp=1706659200)
        assert claims.issued_at.year == 2024
        assert (claims.expires_at - claims.issued_at).days == 30


class TestUser:
    def test_full_name(self):
        user = User(id="u", first_name="Ada", last_name="Lovelace", email="ada@example.com")
        assert user.full_name == "Ada Lovelace"

    def test_serializes_camel_case(self):
        user = User(id="u", first_name="Ada", last_name="Lovelace", email="ada@example.com")
        data = user.model_dump(by_alias=True)
        assert data["firstName"] == "Ada"
        assert data["lastName"] == "Lovelace"

    def test_record_to_user_drops_hash(self):
        record = UserRecord(
            id="u",
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            password_hash="$2b$04$x",
        )
        user = record.to_user()
        assert type(user) is User
        assert not hasattr(user, "password_hash")
