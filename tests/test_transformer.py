import json
import unittest
from unittest.mock import AsyncMock, MagicMock

from manifest_locales.config.settings import TransformOptions
from manifest_locales.exceptions import DirectoryListingError, ManifestFormatError
from manifest_locales.services.transformer import ManifestTransformer


def dumps(data):
    return json.dumps(data, indent=2)


class TestManifestTransformer(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.listing = {}
        self.lister = AsyncMock()
        self.lister.list.side_effect = self._list
        self.diagnostics = MagicMock()
        self.transformer = ManifestTransformer(self.lister, diagnostics=self.diagnostics)

    async def _list(self, directory):
        if directory not in self.listing:
            raise DirectoryListingError(directory)
        return self.listing[directory]

    async def test_no_bundle_without_templates(self):
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {"id": "app", "type": "application", "title": "Title"},
        })
        self.assertIsNone(await self.transformer.transform_text(text))
        self.lister.list.assert_not_called()

    async def test_templates_default_bundle(self):
        self.listing["i18n"] = ["i18n_de.properties", "i18n_en.properties"]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {"id": "app", "type": "application", "title": "{{title}}"},
        })
        result = await self.transformer.transform_text(text)
        expected = """{
  "_version": "1.58.0",
  "sap.app": {
    "id": "app",
    "type": "application",
    "title": "{{title}}",
    "i18n": {
      "bundleUrl": "i18n/i18n.properties",
      "supportedLocales": [
        "de",
        "en"
      ]
    }
  }
}"""
        self.assertEqual(result, expected)
        self.diagnostics.warn.assert_not_called()
        self.diagnostics.error.assert_not_called()

    async def test_explicit_fallback_missing(self):
        self.listing["app/i18n"] = ["i18n_de.properties", "i18n_en.properties"]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {"id": "app"},
            "sap.ui5": {
                "models": {
                    "i18n": {
                        "type": "sap.ui.model.resource.ResourceModel",
                        "settings": {"bundleName": "app.i18n.i18n", "fallbackLocale": "fr"},
                    },
                },
            },
        })
        self.assertIsNone(await self.transformer.transform_text(text))
        self.diagnostics.error.assert_called_once()
        self.assertIn("'fr'", self.diagnostics.error.call_args.args[0])

    async def test_model_locales_appended_after_siblings(self):
        self.listing["sap/ui/demo/app/i18n"] = ["i18n_en.properties", "i18n_de.properties"]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {"id": "sap.ui.demo.app"},
            "sap.ui5": {
                "models": {
                    "i18n": {
                        "type": "sap.ui.model.resource.ResourceModel",
                        "settings": {"bundleName": "sap.ui.demo.app.i18n.i18n", "fallbackLocale": "de"},
                    },
                },
            },
        })
        result = json.loads(await self.transformer.transform_text(text))
        settings = result["sap.ui5"]["models"]["i18n"]["settings"]
        self.assertEqual(list(settings), ["bundleName", "fallbackLocale", "supportedLocales"])
        self.assertEqual(settings["supportedLocales"], ["de", "en"])

    async def test_library_bundle_true(self):
        self.listing[""] = ["messagebundle_de.properties", "messagebundle_en.properties", "library.js"]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {"id": "my.lib", "type": "library"},
            "sap.ui5": {"library": {"i18n": True}},
        })
        result = json.loads(await self.transformer.transform_text(text))
        self.assertEqual(
            result["sap.ui5"]["library"]["i18n"],
            {"bundleUrl": "messagebundle.properties", "supportedLocales": ["de", "en"]},
        )
        self.assertEqual(
            result["sap.app"]["i18n"],
            {"bundleUrl": "messagebundle.properties", "supportedLocales": ["de", "en"]},
        )

    async def test_library_default_app_bundle(self):
        self.listing[""] = ["messagebundle_de.properties", "messagebundle_en.properties"]
        text = dumps({"_version": "1.58.0", "sap.app": {"id": "lib", "type": "library"}})
        result = json.loads(await self.transformer.transform_text(text))
        self.assertEqual(
            result["sap.app"],
            {
                "id": "lib",
                "type": "library",
                "i18n": {"bundleUrl": "messagebundle.properties", "supportedLocales": ["de", "en"]},
            },
        )
        self.lister.list.assert_awaited_once_with("")

    async def test_library_terminology_filled_independently(self):
        self.listing["terminologies/sports"] = [
            "messagebundle_en.properties",
            "messagebundle_de.properties",
        ]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {
                "id": "my.lib",
                "type": "library",
                "i18n": {"bundleUrl": "messagebundle.properties", "supportedLocales": [""]},
            },
            "sap.ui5": {
                "library": {
                    "i18n": {
                        "bundleUrl": "messagebundle.properties",
                        "supportedLocales": ["pt"],
                        "terminologies": {
                            "sports": {"bundleUrl": "terminologies/sports/messagebundle.properties"},
                        },
                    },
                },
            },
        })
        result = json.loads(await self.transformer.transform_text(text))
        i18n = result["sap.ui5"]["library"]["i18n"]
        self.assertEqual(i18n["supportedLocales"], ["pt"])
        self.assertEqual(i18n["terminologies"]["sports"]["supportedLocales"], ["de", "en"])
        self.lister.list.assert_awaited_once_with("terminologies/sports")

    async def test_enhance_with_bundles(self):
        self.listing["i18n"] = ["i18n.properties", "i18n_en.properties"]
        self.listing["reuse"] = ["reuse_en.properties", "reuse_de.properties"]
        self.listing["reuse/terminologies/oil"] = ["reuse_en.properties"]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {
                "id": "app",
                "i18n": {
                    "bundleUrl": "i18n/i18n.properties",
                    "enhanceWith": [
                        {
                            "bundleUrl": "reuse/reuse.properties",
                            "terminologies": {
                                "oil": {"bundleUrl": "reuse/terminologies/oil/reuse.properties"},
                            },
                        },
                    ],
                },
            },
        })
        result = json.loads(await self.transformer.transform_text(text))
        i18n = result["sap.app"]["i18n"]
        self.assertEqual(i18n["supportedLocales"], ["", "en"])
        enhancement = i18n["enhanceWith"][0]
        self.assertEqual(enhancement["supportedLocales"], ["de", "en"])
        self.assertEqual(enhancement["terminologies"]["oil"]["supportedLocales"], ["en"])

    async def test_missing_default_fallback_still_written(self):
        self.listing["i18n"] = ["i18n_de.properties"]
        text = dumps({"_version": "1.58.0", "sap.app": {"id": "app", "i18n": "i18n/i18n.properties"}})
        result = json.loads(await self.transformer.transform_text(text))
        self.assertEqual(result["sap.app"]["i18n"]["supportedLocales"], ["de"])
        self.diagnostics.warn.assert_called_once()

    async def test_listing_error_is_scoped_to_bundle(self):
        self.listing["app/i18n"] = ["i18n_en.properties"]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {"id": "app"},
            "sap.ui5": {
                "models": {
                    "i18n": {
                        "type": "sap.ui.model.resource.ResourceModel",
                        "settings": {"bundleName": "app.i18n.i18n"},
                    },
                    "missing": {
                        "type": "sap.ui.model.resource.ResourceModel",
                        "settings": {"bundleName": "app.missing.i18n"},
                    },
                },
            },
        })
        result = json.loads(await self.transformer.transform_text(text))
        models = result["sap.ui5"]["models"]
        self.assertEqual(models["i18n"]["settings"]["supportedLocales"], ["en"])
        self.assertNotIn("supportedLocales", models["missing"]["settings"])
        self.diagnostics.error.assert_called_once()

    async def test_no_properties_files_found(self):
        self.listing["i18n"] = ["other_en.properties"]
        text = dumps({"_version": "1.58.0", "sap.app": {"id": "app", "i18n": "i18n/i18n.properties"}})
        self.assertIsNone(await self.transformer.transform_text(text))
        self.diagnostics.warn.assert_called_once()
        self.assertIn("none", self.diagnostics.warn.call_args.args[0])
        self.diagnostics.error.assert_not_called()

    async def test_no_properties_files_with_explicit_fallback(self):
        self.listing["i18n"] = []
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {
                "id": "app",
                "i18n": {"bundleUrl": "i18n/i18n.properties", "fallbackLocale": "de"},
            },
        })
        self.assertIsNone(await self.transformer.transform_text(text))
        self.diagnostics.error.assert_called_once()
        self.assertIn("'de'", self.diagnostics.error.call_args.args[0])
        self.diagnostics.warn.assert_not_called()

    async def test_version_checks(self):
        for version in (None, "1.20.0", "1.4.0", "latest", 2):
            with self.subTest(version=version):
                data = {"sap.app": {"id": "app", "title": "{{title}}"}}
                if version is not None:
                    data["_version"] = version
                self.assertIsNone(await self.transformer.transform_text(dumps(data)))
        self.lister.list.assert_not_called()
        self.assertEqual(self.diagnostics.verbose.call_count, 5)

    async def test_short_version_is_accepted(self):
        self.listing["i18n"] = ["i18n_en.properties"]
        text = dumps({"_version": "1.21", "sap.app": {"id": "app", "title": "{{title}}"}})
        self.assertIsNotNone(await self.transformer.transform_text(text))

    async def test_unchanged_documents(self):
        documents = [
            # bundle of another namespace
            {
                "_version": "1.58.0",
                "sap.app": {"id": "app"},
                "sap.ui5": {
                    "models": {
                        "i18n": {
                            "type": "sap.ui.model.resource.ResourceModel",
                            "settings": {"bundleName": "other.i18n.i18n"},
                        },
                    },
                },
            },
            # locales configured already
            {
                "_version": "1.58.0",
                "sap.app": {
                    "id": "app",
                    "i18n": {"bundleUrl": "i18n/i18n.properties", "supportedLocales": [""]},
                },
            },
        ]
        for data in documents:
            with self.subTest(data=data):
                self.assertIsNone(await self.transformer.transform_text(dumps(data)))
        self.lister.list.assert_not_called()

    async def test_idempotence(self):
        self.listing["i18n"] = ["i18n_de.properties", "i18n_en.properties"]
        self.listing["app/i18n"] = ["i18n_de.properties", "i18n_en.properties"]
        text = dumps({
            "_version": "1.58.0",
            "sap.app": {"id": "app", "title": "{{title}}"},
            "sap.ui5": {
                "models": {
                    "i18n": {
                        "type": "sap.ui.model.resource.ResourceModel",
                        "settings": {"bundleName": "app.i18n.i18n"},
                    },
                },
            },
        })
        first = await self.transformer.transform_text(text)
        self.assertIsNotNone(first)
        self.assertIsNone(await self.transformer.transform_text(first))
        # same input and listing, same output
        self.assertEqual(await self.transformer.transform_text(text), first)

    async def test_unrelated_content_is_preserved(self):
        self.listing["i18n"] = ["i18n_en.properties"]
        data = {
            "_version": "1.58.0",
            "sap.app": {"id": "app", "title": "{{title}}", "description": "Ünïcode"},
            "sap.ui": {"technology": "UI5", "deviceTypes": {"desktop": True, "phone": False}},
            "sap.ui5": {"dependencies": {"minUI5Version": "1.120.0", "libs": {"sap.m": {}}}},
        }
        result = await self.transformer.transform_text(dumps(data))
        self.assertIn('"description": "Ünïcode"', result)
        parsed = json.loads(result)
        self.assertEqual(list(parsed), list(data))
        self.assertEqual(parsed["sap.ui"], data["sap.ui"])
        self.assertEqual(parsed["sap.ui5"], data["sap.ui5"])

    async def test_compact_output(self):
        self.listing["i18n"] = ["i18n_en.properties"]
        transformer = ManifestTransformer(
            self.lister, TransformOptions(pretty_print=False), self.diagnostics
        )
        text = dumps({"_version": "1.58.0", "sap.app": {"id": "app", "title": "{{title}}"}})
        self.assertEqual(
            await transformer.transform_text(text),
            '{"_version":"1.58.0","sap.app":{"id":"app","title":"{{title}}",'
            '"i18n":{"bundleUrl":"i18n/i18n.properties","supportedLocales":["en"]}}}',
        )

    async def test_malformed_json(self):
        with self.assertRaises(ManifestFormatError):
            await self.transformer.transform_text('{"_version": "1.58.0",')
        with self.assertRaises(ManifestFormatError):
            await self.transformer.transform_text('["not", "an", "object"]')

    async def test_transform_resource(self):
        self.listing["webapp/i18n"] = ["i18n_en.properties"]
        resource = MagicMock()
        resource.path = "webapp/manifest.json"
        resource.directory = "webapp"
        resource.get_string = AsyncMock(
            return_value=dumps({"_version": "1.58.0", "sap.app": {"id": "app", "title": "{{t}}"}})
        )
        self.assertIs(await self.transformer.transform_resource(resource), resource)
        written = json.loads(resource.set_string.call_args.args[0])
        self.assertEqual(written["sap.app"]["i18n"]["supportedLocales"], ["en"])

    async def test_transform_resources_isolates_failures(self):
        self.listing["i18n"] = ["i18n_en.properties"]
        good = MagicMock(path="manifest.json", directory="")
        good.get_string = AsyncMock(
            return_value=dumps({"_version": "1.58.0", "sap.app": {"id": "app", "title": "{{t}}"}})
        )
        old = MagicMock(path="old/manifest.json", directory="old")
        old.get_string = AsyncMock(return_value=dumps({"_version": "1.12.0", "sap.app": {"id": "app"}}))
        broken = MagicMock(path="broken/manifest.json", directory="broken")
        broken.get_string = AsyncMock(return_value="{")
        outcomes = await self.transformer.transform_resources([good, old, broken])
        self.assertIs(outcomes[0], good)
        self.assertIsNone(outcomes[1])
        self.assertIsInstance(outcomes[2], ManifestFormatError)
        old.set_string.assert_not_called()


if __name__ == '__main__':
    unittest.main()
