from unittest import TestCase, mock

from ... import commands as test_module


class TestInit(TestCase):
    def test_available(self):
        avail = test_module.available_commands()
        assert [cmd["name"] for cmd in avail] == ["help", "migrate", "schema"]

    def test_load_command(self):
        from .. import migrate, schema

        assert test_module.load_command("migrate") is migrate
        assert test_module.load_command("schema") is schema
        assert test_module.load_command("unknown") is None

    def test_run(self):
        with mock.patch.object(
            test_module, "load_command", mock.MagicMock()
        ) as mock_load:
            mock_module = mock.MagicMock()
            mock_load.return_value = mock_module

            test_module.run_command("hello", ["world"])
            mock_load.assert_called_once_with("hello")
            mock_module.execute.assert_called_once_with(["world"])

    def test_run_falls_back_to_help(self):
        help_module = mock.MagicMock()
        with mock.patch.object(
            test_module, "load_command", mock.MagicMock(side_effect=[None, help_module])
        ) as mock_load:
            test_module.run_command("unknown", [])

            assert mock_load.call_args_list == [mock.call("unknown"), mock.call("help")]
            help_module.execute.assert_called_once_with([])
