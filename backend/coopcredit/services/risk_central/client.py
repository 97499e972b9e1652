"""HTTP client for the Risk Central evaluation service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PayloadValidationError

from coopcredit.config import settings
from coopcredit.core.exceptions import ExternalServiceError, ValidationError
from coopcredit.models.domain import RiskEvaluation

logger = logging.getLogger(__name__)

SERVICE_NAME = "risk-central"
EVALUATION_PATH = "/risk-evaluation"


class RiskCentralResponse(BaseModel):
    """Payload returned by POST /risk-evaluation."""

    document: Optional[str] = None
    score: int
    risk_level: str = Field(..., alias="riskLevel")
    detail: Optional[str] = None
    evaluated_at: Optional[datetime] = Field(None, alias="evaluatedAt")

    model_config = ConfigDict(populate_by_name=True)


class RiskCentralClient:
    """
    Async client for the Risk Central service.

    Implements the RiskEvaluator port. Every failure mode (HTTP error,
    timeout, transport error, malformed or empty payload) surfaces as
    ExternalServiceError; the client never retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Risk Central base URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            client: Optional preconfigured httpx client
        """
        self.base_url = base_url or settings.RISK_CENTRAL_BASE_URL
        self.timeout = timeout if timeout is not None else settings.RISK_CENTRAL_TIMEOUT_SECONDS
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def evaluate_risk(
        self, document: str, amount: Decimal, term_months: int
    ) -> RiskEvaluation:
        """
        Request a risk evaluation.

        Args:
            document: Affiliate document
            amount: Requested amount
            term_months: Requested term in months

        Returns:
            RiskEvaluation built from the service response

        Raises:
            ExternalServiceError: On any failure of the remote call
        """
        payload = {"document": document, "amount": float(amount), "term": term_months}

        try:
            client = await self._get_client()
            response = await client.post(EVALUATION_PATH, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling {SERVICE_NAME} after {self.timeout}s")
            raise ExternalServiceError(
                SERVICE_NAME, f"Risk service timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error calling {SERVICE_NAME}: {e.response.status_code}")
            raise ExternalServiceError(
                SERVICE_NAME,
                f"Risk service returned HTTP {e.response.status_code}",
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error calling {SERVICE_NAME}: {e}")
            raise ExternalServiceError(
                SERVICE_NAME, f"Error communicating with risk service: {e}"
            ) from e
        except ValueError as e:
            raise ExternalServiceError(
                SERVICE_NAME, "Risk service returned a non-JSON response"
            ) from e
        except Exception as e:
            logger.error(f"Unexpected error calling {SERVICE_NAME}: {e}", exc_info=e)
            raise ExternalServiceError(
                SERVICE_NAME, f"Unexpected error calling risk service: {e}"
            ) from e

        if data is None:
            raise ExternalServiceError(SERVICE_NAME, "Risk service returned an empty response")

        try:
            parsed = RiskCentralResponse.model_validate(data)
            return RiskEvaluation(
                score=parsed.score,
                risk_level=parsed.risk_level,
                detail=parsed.detail or "",
            )
        except (PayloadValidationError, ValidationError) as e:
            logger.error(f"Malformed payload from {SERVICE_NAME}: {e}")
            raise ExternalServiceError(
                SERVICE_NAME, "Risk service returned a malformed response"
            ) from e
