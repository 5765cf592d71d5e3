from unittest import TestCase

from selcaps import config
from selcaps.config import DriverKind, get_kind, forget
from selcaps.driver import SAFARI, CHROME
from selcaps.options import SafariOptions, ChromeOptions


class ConfigTestCase(TestCase):

    def setUp(self):
        forget()

    def tearDown(self):
        forget()
        SAFARI.register()
        CHROME.register()

    def test_DriverKind_records(self):
        created = DriverKind("Safari", "safari", SafariOptions)
        obtained = get_kind("SAFARI")
        self.assertIs(created, obtained)

    def test_DriverKind_upper_cases_name(self):
        self.assertEqual(DriverKind("safari", "safari", SafariOptions).name,
                         "SAFARI")

    def test_DriverKind_replaces_older_kind(self):
        DriverKind("SAFARI", "safari", SafariOptions)
        newer = DriverKind("SAFARI", "safari", SafariOptions)
        self.assertIs(get_kind("SAFARI"), newer)
        self.assertIs(get_kind("safari"), newer)

    def test_DriverKind_builds_key_table(self):
        kind = DriverKind("SAFARI", "safari", SafariOptions)
        self.assertEqual(kind.keys.to_wire("automatic_inspection"),
                         "safari:automaticInspection")
        self.assertEqual(kind.keys.to_wire("browser_name"), "browserName")

    def test_default_capabilities(self):
        kind = DriverKind("CHROME", "chrome", ChromeOptions)
        self.assertEqual(kind.default_capabilities(),
                         {"browserName": "chrome"})


class GetKindTestCase(TestCase):

    def setUp(self):
        forget()

    def tearDown(self):
        forget()
        SAFARI.register()
        CHROME.register()

    def test_fails_on_unknown(self):
        with self.assertRaisesRegex(ValueError,
                                    "^no driver kind named: SAFARI$"):
            get_kind("safari")

    def test_is_case_insensitive(self):
        kind = DriverKind("SAFARI", "safari", SafariOptions)
        self.assertIs(get_kind("Safari"), kind)

    def test_accepts_abbreviations(self):
        table = {
            "sf": ("SAFARI", "safari", SafariOptions),
            "ch": ("CHROME", "chrome", ChromeOptions),
        }
        for args in table.values():
            DriverKind(*args)

        for abbr, args in table.items():
            self.assertEqual(get_kind(abbr).name, args[0])

    def test_accepts_browser_names(self):
        kind = DriverKind("APPLE", "safari", SafariOptions)
        self.assertIs(get_kind("safari"), kind)

    def test_forget_clears(self):
        DriverKind("SAFARI", "safari", SafariOptions)
        forget()
        self.assertEqual(config.kinds, {})
