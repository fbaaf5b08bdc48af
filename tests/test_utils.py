import base64

from taskboard.config.settings import Settings
from taskboard.utils.avatar import generate_avatar, string_to_color
from taskboard.utils.security import create_access_token, decode_access_token, hash_password, verify_password


def test_string_to_color_matches_web_client_hash():
    assert string_to_color("a") == "#610000"
    assert string_to_color("ab") == "#210c00"


def test_avatar_is_deterministic_svg():
    avatar = generate_avatar("alice")
    assert avatar == generate_avatar("alice")
    assert avatar != generate_avatar("bob")

    svg = base64.b64decode(avatar.split(",", 1)[1]).decode("utf-8")
    assert "<svg" in svg
    assert ">\n                A\n" in svg
    assert string_to_color("alice") in svg


def test_password_hashing():
    hashed = hash_password("s3cret", rounds=4)
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("s3cret", "not-a-hash")


def test_token_round_trip():
    token = create_access_token({"sub": "1", "id": 1, "role": "admin"}, secret_key="k")
    payload = decode_access_token(token, "k")
    assert payload["id"] == 1
    assert payload["role"] == "admin"
    assert "exp" in payload


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FIRST_ADMIN_EMAIL", "root@example.com")
    monkeypatch.setenv("FIRST_ADMIN_PASSWORD", "pw")
    monkeypatch.setenv("SECOND_ADMIN_EMAIL", "ops@example.com")
    monkeypatch.delenv("SECOND_ADMIN_PASSWORD", raising=False)

    settings = Settings.from_env(env_file="/nonexistent/.env")
    assert settings.database_url == "sqlite:///./other.db"
    assert settings.port == 8080
    # The second pair has no password, so it is not seeded but is still allow-listed
    assert [seed.email for seed in settings.admin_seeds] == ["root@example.com"]
    assert settings.admin_emails == ("root@example.com", "ops@example.com")
