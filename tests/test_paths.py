import unittest

from docnexus_client.platform.errors import (
    InvalidParameterError,
    MissingPathParameterError,
    UnresolvedPlaceholderError,
)
from docnexus_client.platform.models import PathParameter
from docnexus_client.platform.paths import canonicalize_npi, has_placeholder, resolve_path

NPI = (PathParameter("npi", canonicalize_npi),)


class TestCanonicalizeNpi(unittest.TestCase):

    def test_strips_formatting(self):
        self.assertEqual(canonicalize_npi("(123) 456-7890"), "1234567890")

    def test_rejects_short_values(self):
        with self.assertRaisesRegex(ValueError, "NPI must be 10 digits"):
            canonicalize_npi("abc")

    def test_rejects_long_values(self):
        with self.assertRaises(ValueError):
            canonicalize_npi("12345678901")


class TestResolvePath(unittest.TestCase):

    def test_literal_template_is_unchanged(self):
        self.assertEqual(resolve_path("v5/search"), "v5/search")
        self.assertEqual(resolve_path("v5/search", (), {"first_name": "John"}), "v5/search")

    def test_npi_is_canonicalized(self):
        path = resolve_path("v5/profile/us/:npi", NPI, {"npi": "(123) 456-7890"})
        self.assertEqual(path, "v5/profile/us/1234567890")

    def test_numeric_npi_is_accepted(self):
        path = resolve_path("v5/profile/us/:npi", NPI, {"npi": 1234567890})
        self.assertEqual(path, "v5/profile/us/1234567890")

    def test_missing_parameter_names_it(self):
        with self.assertRaises(MissingPathParameterError) as ctx:
            resolve_path("v5/profile/us/:npi", NPI, {})
        self.assertEqual(ctx.exception.param_name, "npi")
        self.assertIn("npi", str(ctx.exception))

    def test_none_counts_as_missing(self):
        with self.assertRaises(MissingPathParameterError):
            resolve_path("v5/profile/us/:npi", NPI, {"npi": None})

    def test_missing_payload_counts_as_missing(self):
        with self.assertRaises(MissingPathParameterError):
            resolve_path("v5/profile/us/:npi", NPI, None)

    def test_invalid_npi(self):
        with self.assertRaises(InvalidParameterError) as ctx:
            resolve_path("v5/profile/us/:npi", NPI, {"npi": "abc"})
        self.assertEqual(ctx.exception.param_name, "npi")
        self.assertIn("10 digits", str(ctx.exception))

    def test_other_parameters_are_percent_encoded(self):
        params = (PathParameter("name"),)
        path = resolve_path("items/:name/detail", params, {"name": "a b/c?d"})
        self.assertEqual(path, "items/a%20b%2Fc%3Fd/detail")

    def test_encoding_keeps_uri_component_safe_characters(self):
        params = (PathParameter("name"),)
        self.assertEqual(resolve_path("items/:name", params, {"name": "it's(ok)!*~"}), "items/it's(ok)!*~")

    def test_booleans_use_json_spelling(self):
        params = (PathParameter("flag"),)
        self.assertEqual(resolve_path("flags/:flag", params, {"flag": True}), "flags/true")

    def test_similar_placeholder_names_are_not_confused(self):
        params = (PathParameter("id"),)
        with self.assertRaises(UnresolvedPlaceholderError):
            resolve_path("things/:id/:idx", params, {"id": "7"})

    def test_undeclared_placeholder_is_rejected(self):
        with self.assertRaises(UnresolvedPlaceholderError) as ctx:
            resolve_path("v5/profile/us/:npi")
        self.assertIn("v5/profile/us/:npi", str(ctx.exception))

    def test_same_inputs_same_output(self):
        payload = {"npi": "123-456-7890"}
        self.assertEqual(
            resolve_path("v5/profile/us/:npi", NPI, payload),
            resolve_path("v5/profile/us/:npi", NPI, payload),
        )


class TestHasPlaceholder(unittest.TestCase):

    def test_detects_placeholder_segments(self):
        self.assertTrue(has_placeholder("v5/profile/us/:npi"))
        self.assertTrue(has_placeholder(":npi"))

    def test_ignores_ports_and_schemes(self):
        self.assertFalse(has_placeholder("http://localhost:8080/v5/health"))
        self.assertFalse(has_placeholder("v5/profile/us/1234567890"))


if __name__ == '__main__':
    unittest.main()
