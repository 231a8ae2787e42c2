from django.http import JsonResponse

from storefront.apps.core.health import check_db_and_config

SERVICE_NAME = "storefront"


def _health_response(payload: dict, status: int = 200) -> JsonResponse:
    resp = JsonResponse({"service": SERVICE_NAME, **payload}, status=status)
    resp["Cache-Control"] = "no-store"
    return resp


def healthz(request):
    """Report whether the shop can reach its database and configuration store.

    Load balancers only look at the status code; the body names the failing
    check for humans.
    """
    try:
        checks = check_db_and_config()
    except Exception as exc:  # noqa: BLE001
        return _health_response(
            {"status": "error", "error": f"{type(exc).__name__}: {exc}"}, status=503
        )
    return _health_response({"status": "ok", "checks": checks})
