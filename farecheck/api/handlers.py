"""HTTP request handlers for API endpoints."""

import json
import asyncio
import traceback
from aiohttp import web
from pydantic import ValidationError

from farecheck.core.fare_scanner import select_cheapest
from farecheck.core.price_verifier import verify
from farecheck.models.api_models import RunFlowRequest, SelectCheapestRequest, VerifyPromoRequest
from farecheck.models.fare_models import FareCandidate
from farecheck.services.booking_flow import run_booking_flow


def _bad_request(error: str, details=None):
    return web.json_response({
        "status": "error",
        "error": error,
        "details": details,
    }, status=400)


async def _read_body(request, model):
    """Parse and validate the JSON body; returns (model, error_response)."""
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return None, _bad_request(f"Invalid JSON body: {e}")

    try:
        return model.model_validate(data), None
    except ValidationError as e:
        return None, _bad_request("Invalid request body", json.loads(e.json()))


async def handle_select_cheapest(request):
    """
    Handle POST /select-cheapest endpoint.

    Request body:
    {
        "candidates": [{"id": "fare_0412", "displayed_text": "₹ 4,567"}, ...]
    }

    Returns:
        JSON response with the selected candidate id and its price
    """
    body, error = await _read_body(request, SelectCheapestRequest)
    if error:
        return error

    candidates = [FareCandidate(id=c.id, displayed_text=c.displayed_text) for c in body.candidates]
    cheapest = select_cheapest(candidates)
    print(f"[*] Scanned {len(candidates)} fare candidates, found={cheapest.found}")

    return web.json_response({
        "status": "success",
        "found": cheapest.found,
        "candidate_id": cheapest.candidate_id,
        "price": str(cheapest.price),
    })


async def handle_verify_promo(request):
    """
    Handle POST /verify-promo endpoint.

    Request body:
    {
        "baseline": 1000,
        "feedback_message": "Congratulations! Coupon applied",
        "displayed_total": "₹ 900",
        "displayed_discount": "₹ 100"
    }

    Returns:
        JSON response with the verification result
    """
    body, error = await _read_body(request, VerifyPromoRequest)
    if error:
        return error

    try:
        result = verify(
            body.baseline,
            body.feedback_message,
            body.displayed_total,
            body.displayed_discount,
        )
    except ValueError as e:
        return _bad_request(str(e))

    return web.json_response({
        "status": "success",
        "result": result.to_dict(),
    })


async def handle_run_flow(request):
    """
    Handle POST /run-flow endpoint.

    Opens the booking site in a real browser, picks the cheapest date and
    checks each promo code against it.

    Request body:
    {
        "origin": "Delhi",
        "destination": "Mumbai",
        "promo_codes": ["INVALID", "VALIDCODE"]
    }

    Returns:
        JSON response with the flow report
    """
    body, error = await _read_body(request, RunFlowRequest)
    if error:
        return error

    try:
        print(f"[*] Received run-flow request: {body.origin} -> {body.destination}")
        report = await run_booking_flow(body.origin, body.destination, body.promo_codes)
        print(f"[+] Flow finished with status: {report.status}")
        return web.json_response(report.to_dict())

    except (TimeoutError, asyncio.TimeoutError) as e:
        print(f"[!] Timeout error: {e}")
        return web.json_response({
            "status": "error",
            "error": str(e) or "Booking flow timed out",
            "message": "The booking pages did not respond within the timeout period",
        }, status=408)

    except Exception as e:
        print(f"[!] Error in handle_run_flow: {e}")
        print(traceback.format_exc())
        return web.json_response({
            "status": "error",
            "error": str(e),
            "traceback": traceback.format_exc(),
        }, status=500)
