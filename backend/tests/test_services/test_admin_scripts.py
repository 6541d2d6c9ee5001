"""
Tests for the operator scripts in scripts/admin
"""
import importlib.util
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from firebase_admin import auth as firebase_auth

BACKEND_DIR = Path(__file__).resolve().parents[2]
SCRIPTS_DIR = BACKEND_DIR / "scripts" / "admin"


def load_script(name):
    spec = importlib.util.spec_from_file_location(f"admin_script_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSetAdminClaimsScript:

    def test_missing_user_exits_1(self):
        script = load_script("set_admin_claims")

        with patch.object(script, "set_admin_claim", side_effect=firebase_auth.UserNotFoundError("none")):
            assert script.main(["ghost@example.com"]) == 1

    def test_grants_claim(self):
        script = load_script("set_admin_claims")
        result = SimpleNamespace(uid="u1", already_admin=False, claims={"role": "admin"})

        with patch.object(script, "set_admin_claim", return_value=result) as grant:
            assert script.main(["a@example.com"]) == 0

        grant.assert_called_once_with("a@example.com")


class TestRemoveAdminClaimsScript:

    def test_revokes_claim_with_yes(self):
        script = load_script("remove_admin_claims")
        result = SimpleNamespace(uid="u1", already_admin=True, claims={"role": "user"})

        with patch.object(script, "remove_admin_claim", return_value=result) as revoke:
            assert script.main(["a@example.com", "--yes"]) == 0

        revoke.assert_called_once_with("a@example.com")

    def test_declined_confirmation_changes_nothing(self):
        script = load_script("remove_admin_claims")

        with patch("builtins.input", return_value="no"), \
                patch.object(script, "remove_admin_claim") as revoke:
            assert script.main(["a@example.com"]) == 1

        revoke.assert_not_called()

    def test_confirmed_prompt_revokes(self):
        script = load_script("remove_admin_claims")
        result = SimpleNamespace(uid="u1", already_admin=False, claims={})

        with patch("builtins.input", return_value="yes"), \
                patch.object(script, "remove_admin_claim", return_value=result) as revoke:
            assert script.main(["a@example.com"]) == 0

        revoke.assert_called_once_with("a@example.com")

    def test_missing_user_exits_1(self):
        script = load_script("remove_admin_claims")

        with patch.object(script, "remove_admin_claim", side_effect=firebase_auth.UserNotFoundError("none")):
            assert script.main(["ghost@example.com", "--yes"]) == 1


class TestScriptEnvironment:

    @pytest.mark.parametrize("name", [
        "set_admin_claims",
        "remove_admin_claims",
        "make_user_admin_by_uid",
        "list_users",
        "seed_firestore",
        "add_sample_orders",
    ])
    def test_backend_env_loaded_at_import_from_any_directory(self, name, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with patch("dotenv.load_dotenv") as load:
            load_script(name)

        load.assert_called_once()
        assert Path(load.call_args.args[0]).resolve() == BACKEND_DIR / ".env"


class TestUserDocumentScripts:

    def test_make_user_admin_by_uid(self, fake_db):
        fake_db.put("users", "u1", {"email": "a@example.com"})

        assert load_script("make_user_admin_by_uid").main(["u1"]) == 0
        assert fake_db.data("users", "u1")["role"] == "admin"

    def test_make_user_admin_by_uid_missing(self, fake_db):
        assert load_script("make_user_admin_by_uid").main(["ghost"]) == 1

    def test_list_users(self, fake_db, timestamp):
        fake_db.put("users", "u1", {"email": "a@example.com", "createdAt": timestamp})

        assert load_script("list_users").main() == 0

    def test_list_users_empty(self, fake_db):
        assert load_script("list_users").main() == 0


class TestDataScripts:

    def test_seed_firestore_dry_run(self, fake_db):
        assert load_script("seed_firestore").main(["--dry-run"]) == 0
        assert fake_db.collection("products").docs == {}

    def test_seed_firestore(self, fake_db):
        assert load_script("seed_firestore").main([]) == 0
        assert fake_db.collection("categories").docs

    def test_seed_firestore_missing_file(self, fake_db, tmp_path):
        assert load_script("seed_firestore").main([str(tmp_path / "missing.json")]) == 1

    def test_add_sample_orders(self, fake_db):
        script = load_script("add_sample_orders")

        assert script.main([]) == 0

        stored = list(fake_db.collection("orders").docs.values())
        assert len(stored) == len(script.SAMPLE_ORDERS)
        assert {order["status"] for order in stored} == {"pending", "accepted", "rejected"}

    def test_service_account_guide(self):
        assert load_script("service_account_guide").main() == 0
