"""Console-side listener for the "client added" event."""
from __future__ import annotations

import logging

from crm.domain.entities import Client

logger = logging.getLogger(__name__)


def log_client_added(client: Client) -> None:
    logger.info("New client registered: #%d %s <%s>", client.id, client.name, client.email)
