import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from credential_api.app.core.exceptions import StorageUnavailable
from credential_api.app.core.security import hash_password, secrets_match, verify_password
from credential_api.app.core.storage import JsonFileUserStore, UserStore, resolve_user_data_path


class TestJsonFileUserStore(unittest.TestCase):
    def setUp(self) -> None:
        self._td = TemporaryDirectory()
        self.root = Path(self._td.name)
        self.path = self.root / "user.json"

    def tearDown(self) -> None:
        self._td.cleanup()

    def test_loads_record(self) -> None:
        self.path.write_text(json.dumps({"username": "admin", "password": "secret"}), encoding="utf-8")
        record = JsonFileUserStore(self.path).load()
        self.assertEqual(record.username, "admin")
        self.assertEqual(record.password, "secret")

    def test_reads_fresh_copy_each_time(self) -> None:
        store = JsonFileUserStore(self.path)
        self.path.write_text(json.dumps({"username": "admin", "password": "secret"}), encoding="utf-8")
        self.assertEqual(store.load().password, "secret")
        self.path.write_text(json.dumps({"username": "admin", "password": "changed"}), encoding="utf-8")
        self.assertEqual(store.load().password, "changed")

    def test_missing_file(self) -> None:
        with self.assertRaises(StorageUnavailable) as ctx:
            JsonFileUserStore(self.path).load()
        self.assertEqual(ctx.exception.reason, "file not found")

    def test_invalid_json(self) -> None:
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(StorageUnavailable) as ctx:
            JsonFileUserStore(self.path).load()
        self.assertEqual(ctx.exception.reason, "invalid JSON")

    def test_malformed_records(self) -> None:
        for content in ("[]", '"admin"', "{}", '{"username": "admin"}', '{"username": 1, "password": "x"}'):
            with self.subTest(content=content):
                self.path.write_text(content, encoding="utf-8")
                with self.assertRaises(StorageUnavailable):
                    JsonFileUserStore(self.path).load()

    def test_directory_instead_of_file(self) -> None:
        with self.assertRaises(StorageUnavailable):
            JsonFileUserStore(self.root).load()

    def test_store_interface_cannot_be_instantiated(self) -> None:
        with self.assertRaises(TypeError):
            UserStore()


class TestResolveUserDataPath(unittest.TestCase):
    def test_absolute_path_is_kept(self) -> None:
        path = os.path.abspath(os.path.join(os.sep, "srv", "user.json"))
        self.assertEqual(resolve_user_data_path(path), path)

    def test_relative_path_is_under_project_root(self) -> None:
        project_root = Path(__file__).resolve().parent.parent
        self.assertEqual(resolve_user_data_path("user.json"), str(project_root / "user.json"))


class TestSecurity(unittest.TestCase):
    def test_secrets_match_is_exact(self) -> None:
        self.assertTrue(secrets_match("secret", "secret"))
        self.assertFalse(secrets_match("secret", "Secret"))
        self.assertFalse(secrets_match("secret ", "secret"))

    def test_hash_round_trip(self) -> None:
        hashed = hash_password("secret")
        self.assertNotIn("secret", hashed)
        self.assertTrue(verify_password("secret", hashed))
        self.assertFalse(verify_password("wrong", hashed))

    def test_hashes_are_salted(self) -> None:
        self.assertNotEqual(hash_password("secret"), hash_password("secret"))

    def test_verify_rejects_malformed_hash(self) -> None:
        for stored in ("secret", "zz$zz", ""):
            with self.subTest(stored=stored):
                self.assertFalse(verify_password("secret", stored))

    def test_lone_surrogates_do_not_raise(self) -> None:
        self.assertFalse(secrets_match("\ud800", "admin"))
        self.assertTrue(secrets_match("\ud800", "\ud800"))
        hashed = hash_password("pa\udfffss")
        self.assertTrue(verify_password("pa\udfffss", hashed))
        self.assertFalse(verify_password("\ud800", hashed))


if __name__ == "__main__":
    unittest.main()
