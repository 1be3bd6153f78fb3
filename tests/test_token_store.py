"""Tests for the OAuth token cache."""

import json
import os
import stat

import pytest

from worklog.errors import TokenCacheError
from worklog.token_store import TokenStore


class TestTokenStoreLoad:
    def test_missing_file_returns_none(self, tmp_path) -> None:
        store = TokenStore(str(tmp_path / "token.json"))
        assert store.load() is None

    def test_invalid_json_returns_none(self, tmp_path) -> None:
        path = tmp_path / "token.json"
        path.write_text("{not json")
        assert TokenStore(str(path)).load() is None

    def test_missing_fields_returns_none(self, tmp_path) -> None:
        path = tmp_path / "token.json"
        path.write_text(json.dumps({"token": "abc"}))
        assert TokenStore(str(path)).load() is None

    @pytest.mark.parametrize("document", ["[]", "null", "\"x\"", "42"])
    def test_non_object_json_returns_none(self, tmp_path, document) -> None:
        path = tmp_path / "token.json"
        path.write_text(document)
        assert TokenStore(str(path)).load() is None

    def test_mistyped_expiry_returns_none(self, tmp_path, creds) -> None:
        data = json.loads(creds.to_json())
        data["expiry"] = 1700000000
        path = tmp_path / "token.json"
        path.write_text(json.dumps(data))
        assert TokenStore(str(path)).load() is None

    def test_loads_cached_token(self, settings, token_file) -> None:
        creds = TokenStore(token_file, settings.scopes).load()
        assert creds is not None
        assert creds.token == "access-123"
        assert creds.refresh_token == "refresh-456"
        assert creds.expired is False


class TestTokenStoreSave:
    def test_round_trip(self, tmp_path, creds) -> None:
        store = TokenStore(str(tmp_path / "token.json"))
        store.save(creds)
        loaded = store.load()

        assert loaded.token == creds.token
        assert loaded.refresh_token == creds.refresh_token
        assert loaded.client_id == creds.client_id
        assert loaded.client_secret == creds.client_secret
        assert loaded.scopes == creds.scopes

    def test_overwrites_existing_file(self, tmp_path, creds) -> None:
        path = tmp_path / "token.json"
        path.write_text("stale")
        TokenStore(str(path)).save(creds)
        assert json.loads(path.read_text())["token"] == "access-123"

    def test_file_is_private(self, tmp_path, creds) -> None:
        path = tmp_path / "token.json"
        TokenStore(str(path)).save(creds)
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600

    def test_creates_parent_directory(self, tmp_path, creds) -> None:
        path = tmp_path / "cache" / "token.json"
        TokenStore(str(path)).save(creds)
        assert path.exists()

    def test_announces_path(self, tmp_path, creds, capsys) -> None:
        path = tmp_path / "token.json"
        TokenStore(str(path)).save(creds)
        assert f"Saving credential file to: {path}" in capsys.readouterr().out

    def test_announces_path_through_output(self, tmp_path, creds, capsys) -> None:
        lines = []
        path = tmp_path / "token.json"
        TokenStore(str(path), output=lines.append).save(creds)

        assert lines == [f"Saving credential file to: {path}"]
        assert capsys.readouterr().out == ""

    def test_unwritable_path_raises(self, tmp_path, creds) -> None:
        # A directory where the file should be
        path = tmp_path / "token.json"
        path.mkdir()
        with pytest.raises(TokenCacheError, match="Unable to cache oauth token"):
            TokenStore(str(path)).save(creds)
