import hashlib
import hmac

import structlog
from fastapi import Depends, HTTPException, Request

from src.core.context import RelayContext
from src.webhooks.dependencies import get_relay_context

logger = structlog.get_logger()

SIGNATURE_HEADER = "X-Hub-Signature-256"


def compute_signature(secret: str, payload: bytes) -> str:
    """Return the GitHub-style `sha256=<hex>` HMAC of a payload."""
    mac = hmac.new(secret.encode(), msg=payload, digestmod=hashlib.sha256)
    return f"sha256={mac.hexdigest()}"


async def verify_github_signature(
    request: Request,
    context: RelayContext = Depends(get_relay_context),
) -> bool:
    """
    FastAPI dependency that verifies the GitHub webhook signature.

    This function reads the 'X-Hub-Signature-256' header and compares it
    with a hash of the raw request body, using the relay's webhook secret.

    Raises:
        HTTPException: 400 if the signature header is missing, 401 if it does not match.

    Returns:
        True if the signature is valid.
    """
    signature = request.headers.get(SIGNATURE_HEADER)
    if not signature:
        logger.warning("webhook_signature_missing")
        raise HTTPException(status_code=400, detail="Missing GitHub webhook signature.")

    # Get the raw request payload as bytes
    payload = await request.body()
    expected_signature = compute_signature(context.github_secret, payload)

    # Securely compare the signatures
    if not hmac.compare_digest(signature, expected_signature):
        logger.error("webhook_signature_invalid")
        raise HTTPException(status_code=401, detail="Invalid GitHub webhook signature.")

    logger.debug("webhook_signature_verified")
    return True
