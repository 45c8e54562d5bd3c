import unittest

from gshell.i18n import EXAMPLE_KEYS, TRANSLATIONS, I18n, get_examples, i18n


class TestI18n(unittest.TestCase):
    """Test cases for string localization."""

    def tearDown(self):
        i18n.set_language("en")

    def test_english_returns_key(self):
        self.assertEqual(I18n("en").t("Run this script?"), "Run this script?")

    def test_translation(self):
        self.assertEqual(I18n("es").t("Goodbye!"), "¡Adiós!")

    def test_missing_key_falls_back_to_key(self):
        self.assertEqual(I18n("fr").t("Something new"), "Something new")

    def test_unknown_language_falls_back_to_english(self):
        translator = I18n("xx")

        self.assertEqual(translator.language, "en")
        self.assertEqual(translator.language_name, "English")

    def test_every_language_translates_the_same_keys(self):
        keys = set(TRANSLATIONS["es"])
        for language, table in TRANSLATIONS.items():
            self.assertEqual(set(table), keys, language)

    def test_examples_follow_active_language(self):
        self.assertEqual(get_examples(), EXAMPLE_KEYS)

        i18n.set_language("de")
        self.assertIn("liste js-Dateien auf", get_examples())


if __name__ == "__main__":
    unittest.main()
