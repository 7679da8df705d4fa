import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from envline.core.errors import DotenvIOError, DotenvParseError
from envline.domain.pair import Pair
from envline.services import dotenv_service


class _TempDirCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.env_path = self.dir / ".env"
        self._environ = mock.patch.dict(os.environ, {"ENVLINE_ENV_FILE": str(self.env_path)})
        self._environ.start()

    def tearDown(self) -> None:
        self._environ.stop()
        self._tmp.cleanup()


class TestLoad(_TempDirCase):
    def test_load_file_applies_pairs_in_order(self) -> None:
        self.env_path.write_text("ENVLINE_T_A=1\nexport ENVLINE_T_B='two'\nENVLINE_T_A=3\n", encoding="utf-8")
        pairs = dotenv_service.load_file(self.env_path)
        self.assertEqual(len(pairs), 3)
        self.assertEqual(os.environ["ENVLINE_T_A"], "3")
        self.assertEqual(os.environ["ENVLINE_T_B"], "two")

    def test_load_uses_configured_default_path(self) -> None:
        self.env_path.write_text('ENVLINE_T_DEFAULT="yes"', encoding="utf-8")
        dotenv_service.load()
        self.assertEqual(os.environ["ENVLINE_T_DEFAULT"], "yes")

    def test_missing_file_is_io_error(self) -> None:
        with self.assertRaises(DotenvIOError) as ctx:
            dotenv_service.load_file(self.dir / "nope.env")
        self.assertIsInstance(ctx.exception.cause, FileNotFoundError)
        self.assertNotIsInstance(ctx.exception, DotenvParseError)

    def test_invalid_utf8_is_io_error(self) -> None:
        self.env_path.write_bytes(b"A=\xff\xfe\n")
        with self.assertRaises(DotenvIOError):
            dotenv_service.load_file(self.env_path)

    def test_parse_error_leaves_environment_untouched(self) -> None:
        self.env_path.write_text("ENVLINE_T_EARLY=1\nBROKEN\n", encoding="utf-8")
        with self.assertRaises(DotenvParseError):
            dotenv_service.load_file(self.env_path)
        self.assertNotIn("ENVLINE_T_EARLY", os.environ)

    def test_no_override_keeps_existing_values(self) -> None:
        os.environ["ENVLINE_T_KEEP"] = "process"
        self.env_path.write_text("ENVLINE_T_KEEP=file\nENVLINE_T_NEW=a\nENVLINE_T_NEW=b\n", encoding="utf-8")
        dotenv_service.load_file(self.env_path, override=False)
        self.assertEqual(os.environ["ENVLINE_T_KEEP"], "process")
        self.assertEqual(os.environ["ENVLINE_T_NEW"], "b")

    def test_override_setting_from_environment(self) -> None:
        os.environ["ENVLINE_T_KEEP"] = "process"
        os.environ["ENVLINE_OVERRIDE"] = "false"
        self.env_path.write_text("ENVLINE_T_KEEP=file\n", encoding="utf-8")
        dotenv_service.load()
        self.assertEqual(os.environ["ENVLINE_T_KEEP"], "process")

    def test_environment_failures_are_ignored(self) -> None:
        applied = dotenv_service.apply_pairs([Pair("ENVLINE_T_NUL", "a\x00b"), Pair("ENVLINE_T_OK", "ok")])
        self.assertEqual(applied, 1)
        self.assertNotIn("ENVLINE_T_NUL", os.environ)
        self.assertEqual(os.environ["ENVLINE_T_OK"], "ok")


class TestSetString(_TempDirCase):
    def test_creates_file(self) -> None:
        dotenv_service.set_string("ENVLINE_T_K", "v")
        self.assertEqual(self.env_path.read_text(encoding="utf-8"), 'ENVLINE_T_K="v"\n')
        self.assertEqual(os.environ["ENVLINE_T_K"], "v")

    def test_replaces_in_place_and_keeps_other_lines(self) -> None:
        self.env_path.write_text("# top\nA=1\nENVLINE_T_K=old\nB=2\n", encoding="utf-8")
        dotenv_service.set_string("ENVLINE_T_K", "v")
        dotenv_service.set_string("ENVLINE_T_K", "v2")
        self.assertEqual(
            self.env_path.read_text(encoding="utf-8"),
            '# top\nA=1\nENVLINE_T_K="v2"\nB=2\n',
        )
        self.assertEqual(os.environ["ENVLINE_T_K"], "v2")

    def test_explicit_path(self) -> None:
        other = self.dir / "other.env"
        dotenv_service.set_string("ENVLINE_T_K", "x y", path=other)
        self.assertEqual(other.read_text(encoding="utf-8"), 'ENVLINE_T_K="x y"\n')
        self.assertFalse(self.env_path.exists())

    def test_undecodable_bytes_survive_rewrite(self) -> None:
        self.env_path.write_bytes(b"RAW=\xff\n")
        dotenv_service.set_string("ENVLINE_T_K", "v")
        self.assertEqual(self.env_path.read_bytes(), b'RAW=\xff\nENVLINE_T_K="v"\n')

    def test_write_failure_is_io_error(self) -> None:
        target = self.dir / "missing-dir" / ".env"
        with self.assertRaises(DotenvIOError):
            dotenv_service.set_string("ENVLINE_T_FAIL", "v", path=target)
        self.assertNotIn("ENVLINE_T_FAIL", os.environ)

    def test_environment_failure_after_write_is_ignored(self) -> None:
        dotenv_service.set_string("ENVLINE_T_NUL", "a\x00b")
        self.assertEqual(self.env_path.read_text(encoding="utf-8"), 'ENVLINE_T_NUL="a\x00b"\n')
        self.assertNotIn("ENVLINE_T_NUL", os.environ)

    def test_value_round_trips_through_load(self) -> None:
        value = 'a "b" #c \\d\te'
        dotenv_service.set_string("ENVLINE_T_RT", value)
        del os.environ["ENVLINE_T_RT"]
        dotenv_service.load()
        self.assertEqual(os.environ["ENVLINE_T_RT"], value)


if __name__ == "__main__":
    unittest.main()
