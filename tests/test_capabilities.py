from unittest import TestCase

from selcaps.capabilities import (KeyTable, STANDARD_KEYS, Capabilities,
                                  NormalizedCapabilities)


class KeyTableTestCase(TestCase):

    def setUp(self):
        self.table = KeyTable({
            "browser_name": "browserName",
            "automatic_inspection": "safari:automaticInspection",
        })

    def test_to_wire(self):
        for alias in ("automatic_inspection", "automaticInspection",
                      "safari:automaticInspection"):
            self.assertEqual(self.table.to_wire(alias),
                             "safari:automaticInspection")

    def test_to_wire_passes_unknown_keys(self):
        self.assertEqual(self.table.to_wire("company:key"), "company:key")
        self.assertEqual(self.table.to_wire("some_thing"), "some_thing")

    def test_to_attr(self):
        self.assertEqual(self.table.to_attr("browserName"), "browser_name")
        self.assertEqual(self.table.to_attr("automaticInspection"),
                         "automatic_inspection")
        self.assertIsNone(self.table.to_attr("invalid"))

    def test_normalize(self):
        self.assertEqual(
            self.table.normalize({"browser_name": "safari",
                                  "invalid": "foobar"}),
            {"browserName": "safari", "invalid": "foobar"})

    def test_normalize_last_alias_wins(self):
        normalized = self.table.normalize({"browserName": "chrome",
                                           "browser_name": "safari"})
        self.assertEqual(normalized, {"browserName": "safari"})

        normalized = self.table.normalize({"browser_name": "safari",
                                           "browserName": "chrome"})
        self.assertEqual(normalized, {"browserName": "chrome"})

    def test_normalize_does_not_modify(self):
        original = {"browser_name": "safari"}
        self.table.normalize(original)
        self.assertEqual(original, {"browser_name": "safari"})

    def test_merged(self):
        merged = STANDARD_KEYS.merged({"x_y": "vendor:xY"})
        self.assertEqual(merged.to_wire("x_y"), "vendor:xY")
        self.assertEqual(merged.to_wire("platform_name"), "platformName")
        self.assertNotIn("x_y", STANDARD_KEYS)


class CapabilitiesTestCase(TestCase):

    def test_to_capabilities_snake_case(self):
        caps = Capabilities(browser_name="safari", invalid="foobar")
        self.assertEqual(caps.to_capabilities(),
                         {"browserName": "safari", "invalid": "foobar"})

    def test_to_capabilities_camel_case(self):
        caps = Capabilities({"browserName": "safari", "invalid": "foobar"})
        self.assertEqual(caps.to_capabilities(),
                         {"browserName": "safari", "invalid": "foobar"})

    def test_attribute_access(self):
        caps = Capabilities(browserName="safari", invalid="foobar")
        self.assertEqual(caps.browser_name, "safari")
        self.assertEqual(caps.invalid, "foobar")
        self.assertIsNone(caps.platform_name)
        with self.assertRaises(AttributeError):
            caps.nonexistent  # pylint: disable=pointless-statement


class NormalizedCapabilitiesTestCase(TestCase):

    def test_renames_legacy_fields(self):
        caps = NormalizedCapabilities({"platform": "MAC", "version": "17"})
        self.assertEqual(caps, {"platformName": "MAC",
                                "browserVersion": "17"})

    def test_keeps_w3c_fields(self):
        original = {"browserName": "safari", "platformName": "mac",
                    "browserVersion": "17.1"}
        caps = NormalizedCapabilities(original)
        self.assertEqual(caps, original)
        self.assertIs(caps.caps, original)

    def test_tolerates_missing_fields(self):
        self.assertEqual(NormalizedCapabilities({"browserName": "safari"}),
                         {"browserName": "safari"})
