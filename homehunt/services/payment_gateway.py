"""
Client for the card payment gateway.

Creates payment intents through a Stripe-compatible HTTP API and hands the
client secret back to the browser, which completes the charge itself.
"""

from typing import Any, Dict, Optional
import logging

import httpx

from homehunt.config import settings
from homehunt.utils.exceptions import PaymentGatewayError

logger = logging.getLogger(__name__)


class PaymentGateway:
    """
    Thin async wrapper around one shared ``httpx.AsyncClient``.
    Created once at startup and closed on shutdown.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        secret_key: Optional[str] = None,
        currency: Optional[str] = None,
        timeout_s: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = (base_url or settings.payment_gateway_url).rstrip("/")
        self._secret_key = secret_key if secret_key is not None else settings.payment_gateway_secret_key
        self.currency = currency or settings.payment_currency
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_s or settings.payment_gateway_timeout),
            follow_redirects=False,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def create_payment_intent(self, amount_in_cents: int) -> str:
        """
        Create a card payment intent.

        Args:
            amount_in_cents: Amount in the smallest currency unit

        Returns:
            Client secret of the created intent

        Raises:
            PaymentGatewayError: If the gateway is unconfigured, unreachable
                or refuses the request
        """
        if not self._secret_key:
            raise PaymentGatewayError("Payment gateway is not configured")

        try:
            resp = await self._client.post(
                f"{self._base_url}/v1/payment_intents",
                headers={"Authorization": f"Bearer {self._secret_key}"},
                data={
                    "amount": str(amount_in_cents),
                    "currency": self.currency,
                    "payment_method_types[]": "card",
                },
            )
        except httpx.TimeoutException as e:
            logger.error(f"Payment gateway timed out: {e}")
            raise PaymentGatewayError("Payment gateway timed out")
        except httpx.RequestError as e:
            # DNS errors, connection refused, TLS, etc.
            logger.error(f"Payment gateway unreachable: {e}")
            raise PaymentGatewayError("Payment gateway is unreachable")

        body = _json_body(resp)
        if not 200 <= resp.status_code < 300:
            message = (body.get("error") or {}).get("message") if isinstance(body.get("error"), dict) else None
            logger.warning(f"Payment gateway refused intent: HTTP {resp.status_code} {message or ''}")
            raise PaymentGatewayError(message or f"Payment gateway returned HTTP {resp.status_code}")

        client_secret = body.get("client_secret")
        if not client_secret:
            raise PaymentGatewayError("Payment gateway response had no client secret")

        logger.info(f"Created payment intent {body.get('id', '')} for {amount_in_cents} {self.currency}")
        return client_secret


def _json_body(resp: httpx.Response) -> Dict[str, Any]:
    ct = (resp.headers.get("content-type") or "").lower()
    if "application/json" not in ct:
        return {}
    try:
        parsed = resp.json()
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}
