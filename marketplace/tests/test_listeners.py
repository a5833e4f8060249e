from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase

from marketplace.infra.events.listeners import (
    handle_purchase_created,
    handle_purchase_paid,
    register_marketplace_listeners,
)


class ListenerTests(SimpleTestCase):
    def test_handle_purchase_created_logs_summary(self):
        event_data = {"payload": {"purchase_id": "12", "total_amount": 30000, "seller_ids": [3]}}

        with self.assertLogs("marketplace.infra.events.listeners", level="INFO") as logs:
            handle_purchase_created(event_data)

        self.assertIn("Purchase 12 created", logs.output[0])
        self.assertIn("total=30000", logs.output[0])

    def test_handle_purchase_paid_logs_proofs(self):
        with self.assertLogs("marketplace.infra.events.listeners", level="INFO") as logs:
            handle_purchase_paid({"payload": {"purchase_id": "12", "proof_file_ids": ["101"]}})

        self.assertIn("Purchase 12 paid", logs.output[0])

    @patch("marketplace.infra.events.listeners.get_event_bus")
    def test_register_subscribes_both_handlers(self, mock_get_event_bus):
        bus = MagicMock()
        mock_get_event_bus.return_value = bus

        self.assertIs(register_marketplace_listeners(), bus)
        bus.subscribe.assert_any_call("purchase.created", handle_purchase_created)
        bus.subscribe.assert_any_call("purchase.paid", handle_purchase_paid)
