from unittest import TestCase

from edgeopts import Config, EdgeOptions, get_config, forget


class ConfigTestCase(TestCase):

    def setUp(self):
        forget()

    def test_Config_records(self):
        created = Config("Windows 10", "EdgeChromium", "86")
        obtained = get_config("Windows 10", "EdgeChromium", "86")
        self.assertEqual(created, obtained)

    def test_Config_replaces(self):
        Config("Windows 10", "Edge", "18")
        second = Config("Windows 10", "Edge", "18")
        self.assertIs(get_config(None, "Edge", None), second)

    def test_Config_accepts_browser_abbreviations(self):
        table = {
            "me": "EDGE",
            "legacy": "EDGE",
            "chromium": "EDGECHROMIUM",
        }
        for br in table:
            # We set the platform to br so that we have a piece of data that
            # is not touched by the abbreviation resolution.
            Config(br, br, "30")

        # In this loop we get the configs by using the full names
        for (key, value) in table.items():
            self.assertEqual(get_config(key, value, "30").platform,
                             key.upper())

    def test_Config_refuses_unknown_browser(self):
        with self.assertRaisesRegex(ValueError, "^unknown browser: FIREFOX$"):
            Config("Linux", "Firefox", "80")

    def test_legacy_capabilities(self):
        options = EdgeOptions()
        options.start_page = "https://example.com"
        config = Config("Windows 10", "Edge", "18", options,
                        {"acceptInsecureCerts": True})
        self.assertEqual(config.make_selenium_desired_capabilities(), {
            "browserName": "MicrosoftEdge",
            "ms:edgeChromium": False,
            "ms:startPage": "https://example.com",
            "acceptInsecureCerts": True,
            "platformName": "WINDOWS 10",
            "browserVersion": "18",
        })

    def test_chromium_capabilities(self):
        options = EdgeOptions()
        options.add_argument("--headless")
        config = Config("Windows 10", "EdgeChromium", "86", options)
        caps = config.make_selenium_desired_capabilities()
        self.assertIs(caps["ms:edgeChromium"], True)
        self.assertEqual(caps["ms:edgeOptions"], {"args": ["--headless"]})
        self.assertEqual(caps["browserVersion"], "86")

    def test_str(self):
        config = Config("Windows 10", "Edge", "18", remote=True)
        self.assertEqual(str(config),
                         "Edge configured for WINDOWS 10, EDGE, 18, Remote")


class GetConfigTestCase(TestCase):

    def setUp(self):
        forget()

    def test_fails_on_unknown_triple(self):
        with self.assertRaises(KeyError):
            get_config("Windows 10", "Edge", "18")

    def test_fails_to_infer_by_browser(self):
        with self.assertRaisesRegex(ValueError,
                                    "^no configuration for browser: EDGE$"):
            get_config(None, "Edge", None)

    def test_fails_to_infer_by_version(self):
        with self.assertRaisesRegex(ValueError,
                                    "^no configuration for version: 30$"):
            get_config(None, None, "30")

    def test_fails_to_infer_by_platform(self):
        with self.assertRaisesRegex(ValueError,
                                    "^no configuration for platform: LINUX$"):
            get_config("Linux", None, None)

    def test_no_combination(self):
        Config("Linux", "chromium", "30")
        Config("Windows", "me", "29")
        with self.assertRaisesRegex(
                ValueError,
                "^no configuration for the combination: None, EDGE, 30$"):
            get_config(None, "me", "30")

    def test_ambiguous(self):
        Config("Linux", "chromium", "30")
        Config("Linux", "chromium", "29")
        with self.assertRaisesRegex(
                ValueError,
                "^the combination LINUX, EDGECHROMIUM, None is ambiguous$"):
            get_config("Linux", "chromium", None)

    def test_nothing_given(self):
        Config("Linux", "chromium", "30")
        with self.assertRaisesRegex(
                ValueError,
                "^no configuration for the combination: None, None, None$"):
            get_config()

    def test_platform_case_does_not_matter(self):
        linux = Config("Linux", "chromium", "30")
        self.assertIs(get_config("linux", None, None), linux)

    def test_can_infer(self):
        linux = Config("Linux", "EdgeChromium", "30")
        Config("Windows", "chromium", "29")
        self.assertEqual(get_config(None, "chromium", "30"), linux)
