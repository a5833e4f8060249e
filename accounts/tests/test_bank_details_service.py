from django.test import TestCase

from accounts.domain.services import BankDestination, BankDetailsService
from marketplace.tests.factories import SellerFactory, SellerProfileFactory


class BankDetailsServiceTest(TestCase):
    def setUp(self):
        self.service = BankDetailsService()

    def test_resolves_profiles(self):
        profile = SellerProfileFactory(
            bank_account_name="Mandiri", bank_account_holder="Sari Dewi", bank_account_number="1400012345"
        )

        destinations = self.service.get_bank_destinations([profile.user_id])

        self.assertEqual(
            destinations,
            {
                profile.user_id: BankDestination(
                    bank_account_name="Mandiri", bank_account_holder="Sari Dewi", bank_account_number="1400012345"
                )
            },
        )

    def test_missing_profile_resolves_to_empty_destination(self):
        seller = SellerFactory()

        with self.assertLogs("accounts.domain.services.bank_details_service", level="WARNING"):
            destinations = self.service.get_bank_destinations([seller.pk, seller.pk])

        self.assertEqual(destinations, {seller.pk: BankDestination()})

    def test_empty_input(self):
        with self.assertNumQueries(0):
            self.assertEqual(self.service.get_bank_destinations([]), {})

    def test_has_bank_details(self):
        self.assertTrue(SellerProfileFactory().has_bank_details)
        self.assertFalse(SellerProfileFactory(bank_account_number="").has_bank_details)
