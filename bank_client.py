"""Bank API client.

This module defines a small client for the bank's credit card
transaction API, for services that need to charge a customer.  It
uses the ``requests`` library internally.

* :meth:`BankClient.pay` – submit a payment and get back the receipt
  identifier, or ``None`` when the bank refused the payment or answered
  in an unexpected way.
* :meth:`BankClient.list_transactions` – download the accepted
  payments.

Only refusals are turned into ``None``.  Server errors, unknown paths,
timeouts and connection failures raise the usual ``requests``
exceptions so callers can tell "not paid" apart from "bank unavailable".
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)


class BankClient:
    """Client for the bank's ``/cctransactions`` endpoints."""

    TRANSACTIONS_PATH = "/cctransactions"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 5.0,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the bank, e.g. ``http://localhost:9090``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the bank before giving up.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def pay(self, credit_card: str, amount: float) -> Optional[str]:
        """Charge ``amount`` to ``credit_card``.

        Returns:
            The ``payReceiptId`` issued by the bank, or ``None`` if the
            payment was rejected (400), the bank answered with a success
            status other than 201, or the body held no receipt.
        Raises:
            requests.HTTPError: on any other error status.
            requests.RequestException: on timeouts and connection errors.
        """
        url = f"{self.base_url}{self.TRANSACTIONS_PATH}"
        logger.debug("Sending payment of %s to %s", amount, url)
        response = self.session.post(
            url,
            json={"creditCard": credit_card, "amount": amount},
            timeout=self.timeout,
        )

        if response.status_code == 400:
            logger.warning("Payment of %s rejected by the bank: %s", amount, self._error_message(response))
            return None
        response.raise_for_status()
        if response.status_code != 201:
            logger.warning("Unexpected status code from the bank: %s", response.status_code)
            return None

        receipt = self._receipt(response)
        if receipt is None:
            logger.warning("Empty response body from the bank")
            return None
        return receipt

    def list_transactions(self) -> List[Dict[str, Any]]:
        """Return the receipts of every payment the bank has accepted."""
        response = self.session.get(f"{self.base_url}{self.TRANSACTIONS_PATH}", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _receipt(response: requests.Response) -> Optional[str]:
        if not response.content:
            return None
        try:
            data = response.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        return data.get("payReceiptId") or None

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            err_json = response.json()
        except ValueError:
            return response.text
        if isinstance(err_json, dict):
            return str(err_json.get("detail") or err_json.get("message") or err_json)
        return str(err_json)
