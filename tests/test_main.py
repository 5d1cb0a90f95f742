import logging
import tempfile
import unittest
from pathlib import Path

from _helpers import write_yaml

from profile_config.__main__ import _parse_overrides, main, run
from profile_config.demo import AppConfig, DatabaseConfig
from profile_config.errors import ConfigNotFound


class RunTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.base = write_yaml(
            self.dir,
            "application.yaml",
            """
            app:
              name: demo
              timeout: 30
              tags: [a, b]
              database:
                url: "${PROFILE_CONFIG_TEST_DB_URL:jdbc:default}"
            logging:
              level: WARNING
            """,
        )
        write_yaml(
            self.dir,
            "application-local.yaml",
            """
            app:
              timeout: 5
              debug: true
            """,
        )
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        self._saved_level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler not in self._saved_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(self._saved_level)
        self._tmp.cleanup()

    def test_base_document(self) -> None:
        config = run(["--config", str(self.base)])
        self.assertEqual(
            config,
            AppConfig(name="demo", timeout=30, tags=["a", "b"], database=DatabaseConfig(url="jdbc:default")),
        )
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_profile_and_overrides(self) -> None:
        config = run(
            [
                "--config",
                str(self.base),
                "--profile",
                "local",
                "--set",
                "PROFILE_CONFIG_TEST_DB_URL=jdbc:cli",
            ]
        )
        self.assertEqual(config.timeout, 5)
        self.assertTrue(config.debug)
        self.assertEqual(config.name, "demo")
        self.assertEqual(config.database.url, "jdbc:cli")

    def test_missing_document(self) -> None:
        with self.assertRaises(ConfigNotFound):
            run(["--config", str(self.dir / "missing.yaml")])

    def test_malformed_override_is_a_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            run(["--config", str(self.base), "--set", "novalue"])
        self.assertEqual(ctx.exception.code, 2)

    def test_main_exits_cleanly_on_unknown_logging_level(self) -> None:
        path = write_yaml(self.dir, "loud.yaml", "app:\n  name: demo\nlogging:\n  level: LOUD\n")
        with self.assertRaises(SystemExit) as ctx:
            main(["--config", str(path)])
        self.assertEqual(ctx.exception.code, 1)

    def test_main_exits_cleanly_on_missing_document(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["--config", str(self.dir / "missing.yaml")])
        self.assertEqual(ctx.exception.code, 1)

    def test_parse_overrides(self) -> None:
        self.assertEqual(_parse_overrides(["A=1", "B = x=y"]), {"A": "1", "B": " x=y"})
        with self.assertRaises(ValueError):
            _parse_overrides(["novalue"])


if __name__ == "__main__":
    unittest.main()
