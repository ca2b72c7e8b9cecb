# spendwise/observability.py
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware

from spendwise.security import SESSION_USER_KEY


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        ms = (time.perf_counter() - start) * 1000

        # SessionMiddleware sits inside us; the scope only has a session once it ran
        sess = request.scope.get("session")
        user_id = sess.get(SESSION_USER_KEY) if sess else None

        logging.getLogger("spendwise.req").info(
            "%s %s -> %s in %.1fms user=%s",
            request.method,
            request.url.path,
            response.status_code,
            ms,
            user_id,
        )
        return response
