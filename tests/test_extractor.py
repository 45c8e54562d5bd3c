import unittest

from gshell.extractor import extract_script_and_info


class TestExtractScriptAndInfo(unittest.TestCase):
    """Test cases for splitting responses into script and explanation."""

    def test_code_block_followed_by_explanation(self):
        raw = "```sh\nfind . -name '*.log' -delete\n```\n\n1. Finds log files.\n2. Deletes them."

        script, info = extract_script_and_info(raw)

        self.assertEqual(script, "find . -name '*.log' -delete")
        self.assertEqual(info, "1. Finds log files.\n2. Deletes them.")

    def test_code_block_without_explanation(self):
        self.assertEqual(extract_script_and_info("```bash\nls *.js\n```"), ("ls *.js", ""))

    def test_text_before_block_is_ignored(self):
        raw = "Here you go:\n```\ngit log --oneline\n```\nShows commits."

        self.assertEqual(extract_script_and_info(raw), ("git log --oneline", "Shows commits."))

    def test_inline_fence_keeps_command(self):
        self.assertEqual(extract_script_and_info("```ls -la```"), ("ls -la", ""))

    def test_multiline_script(self):
        raw = "```sh\nfor f in *.txt; do\n  echo \"$f\"\ndone\n```"

        script, _ = extract_script_and_info(raw)

        self.assertEqual(script, "for f in *.txt; do\n  echo \"$f\"\ndone")

    def test_unterminated_block(self):
        self.assertEqual(extract_script_and_info("```sh\ncurl https://icanhazdadjoke.com"), ("curl https://icanhazdadjoke.com", ""))

    def test_no_fence_is_bare_command(self):
        self.assertEqual(extract_script_and_info("  ls *.js\n"), ("ls *.js", ""))

    def test_empty_block_is_empty_script(self):
        script, info = extract_script_and_info("```sh\n```\nThat does not look like a request.")

        self.assertEqual(script, "")
        self.assertEqual(info, "That does not look like a request.")

    def test_empty_response(self):
        self.assertEqual(extract_script_and_info(""), ("", ""))


if __name__ == "__main__":
    unittest.main()
