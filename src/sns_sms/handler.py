import asyncio
import json
import os
from decimal import Decimal, InvalidOperation

from sns_sms.errors import InvalidRegion, MissingCredential, RemoteFailure
from sns_sms.sms import SmsSender, SmsType
from sns_sms.utils.logger import get_logger, mask_phone

logger = get_logger("handler")


def _load_env() -> SmsSender:
    """
    Build the sender from environment configuration.

    SMS_TYPE: Promotional or Transactional (default Transactional)
    SMS_SENDER_ID: sender id shown to recipients (default: none)
    SMS_MAX_PRICE: per-message price ceiling in USD (default 0.01)

    Raises RuntimeError with a clear message if something is invalid.
    AWS credentials are not read here; the sender reads them on each send.
    """
    sms_type_str = os.getenv("SMS_TYPE", "Transactional")
    sender_id = os.getenv("SMS_SENDER_ID", "")
    max_price_str = os.getenv("SMS_MAX_PRICE", "0.01")

    try:
        sms_type = SmsType.parse(sms_type_str)
    except ValueError:
        msg = (
            f"Invalid SMS_TYPE='{sms_type_str}'. "
            "Must be Promotional or Transactional."
        )
        logger.error(msg)
        raise RuntimeError(msg)

    try:
        max_price = Decimal(max_price_str)
    except InvalidOperation:
        max_price = None

    if max_price is None or not max_price.is_finite() or max_price < 0:
        msg = (
            f"Invalid SMS_MAX_PRICE='{max_price_str}'. "
            "Must be a non-negative decimal number."
        )
        logger.error(msg)
        raise RuntimeError(msg)

    return SmsSender(sms_type=sms_type, sender_id=sender_id, max_price=max_price)


def _parse_body(event: dict) -> dict:
    """
    Extract and parse the JSON body from the Lambda event.

    - For API Gateway / HttpApi: event["body"] is a JSON string.
    - For direct invocation: the event itself is the payload.
    """
    body = event.get("body")

    if isinstance(body, dict):
        return body
    if isinstance(body, str):
        try:
            return json.loads(body)
        except json.JSONDecodeError:
            logger.warning(
                "handler.invalid_json",
                extra={"fields": {"body_preview": body[:200]}},
            )
            raise
    return event


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context):
    logger.info(
        "handler.lambda_start",
        extra={"fields": {"request_id": getattr(context, "aws_request_id", None)}},
    )

    # 1) Configuration
    try:
        sender = _load_env()
    except RuntimeError as e:
        logger.error("handler.env_error", extra={"fields": {"error": str(e)}})
        return _response(500, {"error": "server_misconfigured"})

    # 2) Payload
    try:
        payload = _parse_body(event)
    except json.JSONDecodeError:
        return _response(400, {"error": "invalid_json"})

    if not isinstance(payload, dict):
        logger.warning(
            "handler.invalid_payload",
            extra={"fields": {"payload_type": type(payload).__name__}},
        )
        return _response(400, {"error": "invalid_json"})

    message = payload.get("message")
    phone = payload.get("phone_number")

    if not message or not phone:
        logger.warning(
            "handler.missing_fields",
            extra={
                "fields": {
                    "message_present": bool(message),
                    "phone_present": bool(phone),
                }
            },
        )
        return _response(400, {"error": "missing_required_fields"})

    # 3) Send
    try:
        resp = asyncio.run(sender.send(message, phone))
    except MissingCredential as e:
        logger.error(
            "handler.missing_credential",
            extra={"fields": {"credential": e.credential.name, "error": str(e)}},
        )
        return _response(
            500, {"error": "missing_credential", "credential": e.credential.name}
        )
    except InvalidRegion as e:
        logger.error("handler.invalid_region", extra={"fields": {"region": e.region}})
        return _response(500, {"error": "invalid_region"})
    except RemoteFailure as e:
        logger.error(
            "handler.publish_failed",
            extra={"fields": {"error": str(e), "to": mask_phone(phone)}},
        )
        return _response(502, {"error": "publish_failed"})

    return _response(200, {"message_id": resp.get("MessageId")})
