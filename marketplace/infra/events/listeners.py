import logging

from infrastructure.events import get_event_bus


logger = logging.getLogger(__name__)


def handle_purchase_created(event_data):
    """Handle purchase.created event."""
    payload = event_data.get("payload", {})
    logger.info(
        f"[Marketplace Listener] Purchase {payload.get('purchase_id')} created: "
        f"total={payload.get('total_amount')}, sellers={payload.get('seller_ids')}"
    )


def handle_purchase_paid(event_data):
    """Handle purchase.paid event."""
    payload = event_data.get("payload", {})
    logger.info(
        f"[Marketplace Listener] Purchase {payload.get('purchase_id')} paid "
        f"with proofs {payload.get('proof_file_ids')}"
    )


def register_marketplace_listeners():
    """Register all marketplace event listeners."""
    event_bus = get_event_bus()
    event_bus.subscribe("purchase.created", handle_purchase_created)
    event_bus.subscribe("purchase.paid", handle_purchase_paid)
    logger.info("Marketplace event listeners registered")
    return event_bus
