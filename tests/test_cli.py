import unittest
from unittest.mock import patch, MagicMock

from gshell.cli import run_cli
from gshell.errors import ConfigurationError, StreamError, UserCancelled
from gshell.flow import State
from gshell.i18n import i18n
from gshell.main import main


class TestRunCli(unittest.TestCase):
    """Test cases for the command-line entry point."""

    def setUp(self):
        self.config = MagicMock(
            api_key="key",
            api_endpoint=None,
            model="gemini-2.5-flash",
            silent_mode=False,
            language="en",
        )
        patches = {
            "get_config": patch("gshell.cli.get_config", return_value=self.config),
            "setup_logging": patch("gshell.cli.setup_logging"),
            "client": patch("gshell.cli.GeminiClient"),
            "flow": patch("gshell.cli.InteractionFlow"),
            "ui": patch("gshell.cli.TerminalUI"),
        }
        self.mocks = {name: p.start() for name, p in patches.items()}
        for p in patches.values():
            self.addCleanup(p.stop)
        self.flow = self.mocks["flow"].return_value
        self.flow.run.return_value = State.CANCELLED

    def tearDown(self):
        i18n.set_language("en")

    def test_prompt_words_are_joined(self):
        self.assertEqual(run_cli(["list", "js", "files"]), 0)

        self.flow.run.assert_called_once_with("list js files")
        self.config.validate.assert_called_once()
        self.mocks["client"].assert_called_once_with(
            api_key="key", model="gemini-2.5-flash", api_endpoint=None, language="en",
        )

    def test_no_prompt_asks_interactively(self):
        run_cli([])

        self.flow.run.assert_called_once_with(None)

    def test_silent_flag(self):
        run_cli(["--silent", "list", "js", "files"])

        self.assertTrue(self.mocks["flow"].call_args[1]["silent_mode"])

    def test_silent_mode_from_config(self):
        self.config.silent_mode = True

        run_cli(["list"])

        self.assertTrue(self.mocks["flow"].call_args[1]["silent_mode"])

    def test_language_and_examples_from_config(self):
        self.config.language = "es"

        run_cli(["hola"])

        self.assertEqual(i18n.language, "es")
        self.assertIn("lista los archivos js", self.mocks["flow"].call_args[1]["examples"])

    def test_user_cancel_exits_cleanly(self):
        self.flow.run.side_effect = UserCancelled("Goodbye!")

        self.assertEqual(run_cli([]), 0)
        self.mocks["ui"].return_value.cancel.assert_called_once_with("Goodbye!")

    def test_missing_api_key_stops_before_client(self):
        self.config.validate.side_effect = ConfigurationError("Invalid config property GEMINI_API_KEY: missing")

        with self.assertRaises(ConfigurationError):
            run_cli(["list"])

        self.mocks["client"].assert_not_called()

    def test_loaded_configuration_is_logged(self):
        self.config.__str__.return_value = "{'api_key': 'abcd...5678'}"

        with self.assertLogs("gshell.cli", level="INFO") as logs:
            run_cli(["list"])

        self.assertIn("INFO:gshell.cli:Loaded configuration: {'api_key': 'abcd...5678'}", logs.output)


class TestConfigCommand(unittest.TestCase):
    """Test cases for the 'config' command."""

    @patch("gshell.cli.set_config_values")
    def test_set(self, mock_set):
        self.assertEqual(run_cli(["config", "set", "SILENT_MODE=true", "GEMINI_MODEL=gemini-pro"]), 0)

        mock_set.assert_called_once_with({"SILENT_MODE": "true", "GEMINI_MODEL": "gemini-pro"})

    @patch("gshell.cli.set_config_values")
    def test_set_requires_key_value(self, mock_set):
        with self.assertRaises(ConfigurationError):
            run_cli(["config", "set", "SILENT_MODE"])

        mock_set.assert_not_called()

    @patch("gshell.cli.console")
    @patch("gshell.cli.get_config_values", return_value={"GEMINI_MODEL": "gemini-pro", "LANGUAGE": None})
    def test_get(self, mock_get, mock_console):
        self.assertEqual(run_cli(["config", "get", "GEMINI_MODEL", "LANGUAGE"]), 0)

        mock_get.assert_called_once_with(["GEMINI_MODEL", "LANGUAGE"])
        printed = [c[0][0] for c in mock_console.print.call_args_list]
        self.assertEqual(printed, ["GEMINI_MODEL=gemini-pro", "LANGUAGE="])


class TestMain(unittest.TestCase):
    """Test cases for process exit codes."""

    def _exit_code(self, **run_cli_kwargs):
        with patch("gshell.main.run_cli", **run_cli_kwargs), patch("gshell.main.console"):
            with self.assertRaises(SystemExit) as ctx:
                main()
        return ctx.exception.code

    def test_normal_exit(self):
        self.assertEqual(self._exit_code(return_value=0), 0)

    def test_configuration_error_exits_1(self):
        self.assertEqual(self._exit_code(side_effect=ConfigurationError("bad")), 1)

    def test_stream_error_exits_1(self):
        self.assertEqual(self._exit_code(side_effect=StreamError("broken")), 1)

    def test_keyboard_interrupt_exits_130(self):
        self.assertEqual(self._exit_code(side_effect=KeyboardInterrupt()), 130)


if __name__ == "__main__":
    unittest.main()
