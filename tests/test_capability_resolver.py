"""Tests for choosing the statement request version."""

from unittest import TestCase

from fints_statement.core.exceptions import UnsupportedVersion
from fints_statement.domain.statement.models import CapabilitySet
from fints_statement.domain.statement.services import CapabilityResolver


class CapabilityResolverTests(TestCase):
    def setUp(self):
        self.resolver = CapabilityResolver()

    def test_highest_supported_version_wins(self):
        capabilities = CapabilitySet(advertised_versions=[4, 5, 6, 7])
        self.assertEqual(self.resolver.resolve(capabilities), 7)

    def test_unknown_newer_versions_are_skipped(self):
        capabilities = CapabilitySet(advertised_versions=[5, 6, 8, 9])
        self.assertEqual(self.resolver.resolve(capabilities), 6)

    def test_order_of_advertised_versions_is_irrelevant(self):
        capabilities = CapabilitySet(advertised_versions=[6, 4, 5])
        self.assertEqual(self.resolver.resolve(capabilities), 6)

    def test_no_known_version_fails(self):
        capabilities = CapabilitySet(advertised_versions=[2, 3, 8])
        with self.assertRaises(UnsupportedVersion) as ctx:
            self.resolver.resolve(capabilities)
        self.assertEqual(ctx.exception.advertised, [2, 3, 8])
        self.assertEqual(ctx.exception.error_code, "UNSUPPORTED_VERSION")

    def test_missing_parameters_fail(self):
        with self.assertRaises(UnsupportedVersion):
            self.resolver.resolve(None)

    def test_empty_advertisement_fails(self):
        with self.assertRaises(UnsupportedVersion):
            self.resolver.resolve(CapabilitySet(advertised_versions=[]))

    def test_restricted_known_versions(self):
        resolver = CapabilityResolver(known_versions=[4, 5])
        self.assertEqual(resolver.resolve(CapabilitySet(advertised_versions=[5, 6, 7])), 5)

    def test_empty_known_versions_support_nothing(self):
        resolver = CapabilityResolver(known_versions=[])
        with self.assertRaises(UnsupportedVersion):
            resolver.resolve(CapabilitySet(advertised_versions=[4, 5, 6, 7]))
