"""Tests for the metadata store."""
import unittest

from mobi_builder.model.settings import DEFAULT_TITLE, Settings, parse_flag


class SettingsTest(unittest.TestCase):
    """Reserved keys are typed; everything else passes through."""

    def test_defaults(self) -> None:
        settings = Settings()
        self.assertEqual(settings.get("title"), DEFAULT_TITLE)
        self.assertTrue(settings.get("toc"))
        self.assertEqual(settings.as_metadata(), {"title": "Unknown Title", "toc": True})

    def test_reserved_keys_update_typed_fields(self) -> None:
        settings = Settings()
        settings.set("title", "My Book")
        settings.set("toc", False)

        self.assertEqual(settings.title, "My Book")
        self.assertFalse(settings.toc)
        self.assertEqual(settings.extensions, {})

    def test_unknown_keys_are_retained_and_forwarded(self) -> None:
        settings = Settings.from_mapping({"title": "T", "author": "John Doe", "publisher": {"name": "X"}})

        self.assertEqual(settings.get("author"), "John Doe")
        self.assertEqual(
            settings.as_metadata(),
            {"title": "T", "toc": True, "author": "John Doe", "publisher": {"name": "X"}},
        )

    def test_get_missing_key_returns_default(self) -> None:
        settings = Settings()
        self.assertIsNone(settings.get("isbn"))
        self.assertEqual(settings.get("isbn", "n/a"), "n/a")

    def test_toc_strings_are_parsed_not_truthiness_checked(self) -> None:
        for raw in ("false", "False", "0", "no", " off "):
            settings = Settings()
            settings.set("toc", raw)
            self.assertFalse(settings.toc, raw)
        for raw in ("true", "1", "YES", "on"):
            settings = Settings(toc=False)
            settings.set("toc", raw)
            self.assertTrue(settings.toc, raw)
        self.assertFalse(Settings.from_mapping({"toc": 0}).toc)

    def test_unrecognised_toc_value_rejected(self) -> None:
        settings = Settings()
        for raw in ("maybe", "", 2, None, [1]):
            with self.assertRaises(ValueError):
                settings.set("toc", raw)
        self.assertTrue(settings.toc)
        with self.assertRaises(ValueError):
            parse_flag("enabled")

    def test_copy_is_independent(self) -> None:
        original = Settings(title="A", extensions={"author": "X"})
        duplicate = original.copy()
        duplicate.set("title", "B")
        duplicate.set("author", "Y")

        self.assertEqual(original.title, "A")
        self.assertEqual(original.get("author"), "X")
        self.assertEqual(duplicate.as_metadata(), {"title": "B", "toc": True, "author": "Y"})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
