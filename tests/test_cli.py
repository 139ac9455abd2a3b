import os
import tempfile
import unittest

from click.testing import CliRunner

from linesh.cli import main
from linesh.version import __version__


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = os.path.realpath(self._tmp.name)
        self.env = {"PATH": self.tmpdir, "LINESH_DEBUG": ""}

    def tearDown(self):
        self._tmp.cleanup()

    def invoke(self, args, **kwargs):
        return self.runner.invoke(main, args, env=self.env, **kwargs)

    def write(self, name, content):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w") as f:
            f.write(content)
        return path

    def test_command_string(self):
        result = self.invoke(["-c", "echo 'hello   world'"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output, "hello   world\n")

    def test_command_string_status(self):
        result = self.invoke(["-c", "exit 1"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Usage: exit 0", result.output)

        result = self.invoke(["-c", "nosuchcommand_xyz"])
        self.assertEqual(result.exit_code, 127)

    def test_command_string_redirect(self):
        target = os.path.join(self.tmpdir, "out.txt")
        result = self.invoke(["-c", f"echo saved > {target}"])
        self.assertEqual(result.exit_code, 0)
        with open(target) as f:
            self.assertEqual(f.read(), "saved\n")

    def test_script(self):
        target = os.path.join(self.tmpdir, "out.txt")
        script = self.write("script.sh", f"# comment\n\necho one\necho two >> {target}\necho three >> {target}\n")
        result = self.invoke([script])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output, "one\n")
        with open(target) as f:
            self.assertEqual(f.read(), "two\nthree\n")

    def test_script_stops_at_failure(self):
        script = self.write("script.sh", "echo a\nnosuchcommand_xyz\necho b\n")
        result = self.invoke([script])
        self.assertEqual(result.exit_code, 127)
        self.assertIn("Error at line 2", result.output)
        self.assertNotIn("b", result.output.splitlines())

    def test_missing_script(self):
        result = self.invoke([os.path.join(self.tmpdir, "missing.sh")])
        self.assertEqual(result.exit_code, 127)
        self.assertIn("No such file or directory", result.output)

    def test_interactive(self):
        result = self.invoke(["--prompt", "> "], input="echo hi\n\nexit 3\necho again\nexit 0\necho never\n")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("hi\n", result.output)
        self.assertIn("Usage: exit 0", result.output)
        self.assertIn("again\n", result.output)
        self.assertNotIn("never", result.output)

    def test_interactive_eof(self):
        result = self.invoke([], input="echo last\n")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("last\n", result.output)

    def test_version(self):
        result = self.invoke(["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(f"linesh {__version__}", result.output)


if __name__ == '__main__':
    unittest.main()
